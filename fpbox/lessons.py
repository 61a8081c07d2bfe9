import json
import logging
import os
from typing import Callable, Tuple, Union

from .compose import identity
from .domain import Plant, Post, User
from .ftypes import Box, Maybe, Result, failure, from_nullable, success, wrap

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "data", "seed.json")
)

NO_COMMON_NAME = "Plant has no common name"
ACCESS_DENIED = "Access denied"


def resolve_log_level(name: str, default: int = logging.INFO) -> int:
    """Имя уровня ("debug", "WARNING") → число; неизвестное имя → default"""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def load_seed(
    path: str = DEFAULT_SEED_PATH,
) -> Tuple[Tuple[Plant, ...], Tuple[User, ...], Tuple[Post, ...]]:
    """Загружает seed.json и возвращает кортежи иммутабельных записей"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    plants = tuple(map(lambda p: Plant(**p), data.get("plants", [])))
    users = tuple(map(lambda u: User(**u), data.get("users", [])))
    posts = tuple(map(lambda p: Post(**p), data.get("posts", [])))

    logger.info(
        "Loaded seed %s: %d plants, %d users, %d posts",
        path,
        len(plants),
        len(users),
        len(posts),
    )
    return plants, users, posts


# ============ Box: последовательные преобразования ============


def next_char_from_number(text: str) -> str:
    """
    " 64" → "A"
    trim → int → +1 → chr, без промежуточных переменных
    """
    return (
        wrap(text)
        .map(str.strip)
        .map(int)
        .map(lambda n: n + 1)
        .unwrap(chr)
    )


def box_trace(text: str) -> Tuple[Box, ...]:
    """Все промежуточные коробки пайплайна next_char_from_number (для демо)"""
    steps: Tuple[Callable, ...] = (str.strip, int, lambda n: n + 1, chr)
    boxes = (wrap(text),)
    for step in steps:
        boxes = boxes + (boxes[-1].map(step),)
    return boxes


# ============ Maybe: вместо проверок на None ============


def find_plant(plants: Tuple[Plant, ...], plant_id: str) -> Maybe[Plant]:
    """Безопасный поиск растения по ID"""
    return from_nullable(next((p for p in plants if p.id == plant_id), None))


def _no_common_name() -> str:
    logger.warning(NO_COMMON_NAME)
    return NO_COMMON_NAME


def plant_common_name(plant: Plant) -> str:
    """Общее название в верхнем регистре или сообщение-заглушка"""
    return (
        from_nullable(plant.common_name)
        .map(str.upper)
        .get_or_else(_no_common_name)
    )


# ============ Result: ошибки как значения ============


def attempt(fn: Callable, *args, **kwargs) -> Result[Exception, object]:
    """
    Вызывает fn и превращает исключение в Failure(exc).
    Ловится только Exception, KeyboardInterrupt и т.п. пролетают.
    """
    try:
        return success(fn(*args, **kwargs))
    except Exception as exc:
        logger.debug("attempt(%s) failed: %r", getattr(fn, "__name__", fn), exc)
        return failure(exc)


def safe_parse_int(text: str) -> Result[str, int]:
    return attempt(int, text.strip()).map_failure(
        lambda exc: f"Not a number: {text!r}"
    )


def lookup_posts(user_id: int, posts: Tuple[Post, ...]) -> Result[str, Tuple[Post, ...]]:
    """
    Failure("Access denied") для user_id == 0
    Success(посты пользователя) для остальных
    """
    if user_id == 0:
        return failure(ACCESS_DENIED)
    return success(tuple(p for p in posts if p.user_id == user_id))


def user_posts_report(user: User, posts: Tuple[Post, ...]) -> Union[str, Tuple[Post, ...]]:
    """user → id → lookup_posts → fold(сообщение об ошибке, посты)"""
    return (
        success(user)
        .map(lambda u: u.id)
        .flat_map(lambda uid: lookup_posts(uid, posts))
        .fold(identity, identity)
    )
