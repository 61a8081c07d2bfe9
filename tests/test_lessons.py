import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import json
import logging
import pytest
from fpbox.domain import Plant, Post, User
from fpbox.ftypes import Box, Maybe, failure, success
from fpbox.lessons import (
    ACCESS_DENIED,
    NO_COMMON_NAME,
    attempt,
    box_trace,
    find_plant,
    load_seed,
    lookup_posts,
    next_char_from_number,
    plant_common_name,
    resolve_log_level,
    safe_parse_int,
    user_posts_report,
)

# реальные данные из seed.json
plants, users, posts = load_seed()


@pytest.fixture
def sample_posts():
    return (
        Post(id=1, user_id=1, title="First"),
        Post(id=2, user_id=1, title="Second"),
        Post(id=3, user_id=2, title="Other"),
    )


def test_load_seed():
    """Проверка загрузки данных из seed.json"""
    assert len(plants) > 0
    assert all(isinstance(u, User) for u in users)
    assert any(p.common_name is None for p in plants)


def test_load_seed_custom_path(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"plants": [{"id": "x", "name": "X"}]}))

    loaded_plants, loaded_users, loaded_posts = load_seed(str(path))

    assert loaded_plants == (Plant(id="x", name="X"),)
    assert loaded_users == () and loaded_posts == ()


def test_load_seed_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed(str(tmp_path / "nope.json"))


# Box


def test_next_char_from_number():
    assert next_char_from_number(" 64") == "A"
    assert next_char_from_number("96 ") == "a"


def test_next_char_from_number_bad_input_raises():
    with pytest.raises(ValueError):
        next_char_from_number("sixty-four")


def test_next_char_from_number_huge_number_overflows():
    """chr не принимает огромные коды: Box пропускает OverflowError наружу"""
    with pytest.raises(OverflowError):
        next_char_from_number("99999999999999999999")


def test_box_trace():
    trace = box_trace(" 64")

    assert trace[0] == Box(" 64")
    assert trace[-1] == Box("A")
    assert len(trace) == 5


# Maybe


def test_plant_common_name_present():
    plant = Plant(id="p", name="Ficus lyrata", common_name="Fiddle-leaf fig")
    assert plant_common_name(plant) == "FIDDLE-LEAF FIG"


def test_plant_common_name_absent_logs(caplog):
    plant = Plant(id="p", name="Sansevieria trifasciata")

    with caplog.at_level(logging.WARNING, logger="fpbox.lessons"):
        assert plant_common_name(plant) == "Plant has no common name"

    assert NO_COMMON_NAME in caplog.text


def test_find_plant():
    assert find_plant(plants, plants[0].id) == Maybe.some(plants[0])
    assert find_plant(plants, "missing").is_none


# Result


def test_attempt():
    assert attempt(int, "12") == success(12)

    res = attempt(int, "twelve")
    assert res.is_failure
    assert isinstance(res.value, ValueError)


def test_attempt_does_not_catch_base_exceptions():
    def interrupt():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        attempt(interrupt)


def test_safe_parse_int():
    assert safe_parse_int(" 7 ") == success(7)
    assert safe_parse_int("x") == failure("Not a number: 'x'")


def test_lookup_posts(sample_posts):
    assert lookup_posts(0, sample_posts) == failure(ACCESS_DENIED)
    assert lookup_posts(1, sample_posts) == success(sample_posts[:2])


def test_user_posts_report(sample_posts):
    """Два разных пользователя: ошибка для одного, два поста для другого"""
    guest = User(id=0, name="Guest")
    ada = User(id=1, name="Ada")

    assert user_posts_report(guest, sample_posts) == "Access denied"

    found = user_posts_report(ada, sample_posts)
    assert len(found) == 2
    assert all(p.user_id == 1 for p in found)


def test_user_posts_report_on_seed():
    by_id = {u.id: u for u in users}

    assert user_posts_report(by_id[0], posts) == ACCESS_DENIED
    assert len(user_posts_report(by_id[1], posts)) == 2


# logging config


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("INFO", logging.INFO)],
)
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


def test_resolve_log_level_unknown_falls_back():
    assert resolve_log_level("verbose") == logging.INFO
    assert resolve_log_level("", default=logging.ERROR) == logging.ERROR
