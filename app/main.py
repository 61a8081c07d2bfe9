import sys
import os
import logging
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fpbox.ftypes import wrap, from_nullable, success
from fpbox.lessons import (
    load_seed,
    resolve_log_level,
    box_trace,
    next_char_from_number,
    find_plant,
    plant_common_name,
    safe_parse_int,
    lookup_posts,
    user_posts_report,
)

logging.basicConfig(
    level=resolve_log_level(os.environ.get("FPBOX_LOG_LEVEL", "INFO")),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ============ Кэширование данных ============
@st.cache_data
def get_data():
    return load_seed()


# ============ Инициализация ============
st.set_page_config(
    page_title="FP Containers",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="expanded",
)

plants, users, posts = get_data()


# ============ HEADER ============
st.title("📦 Функциональные контейнеры")
st.caption("Box · Maybe · Result")

# ============ SIDEBAR - Навигация ============
with st.sidebar:
    st.header("📂 Навигация")
    page = st.radio(
        "Выберите раздел:",
        ["📦 Box", "❓ Maybe", "⚖️ Result", "🧪 Tests Demo"],
        label_visibility="collapsed",
    )

    st.divider()
    st.markdown("### 🎯 Темы")
    st.success("✅ Box: map / unwrap")
    st.success("✅ Maybe: from_nullable / get_or_else")
    st.success("✅ Result: flat_map / fold")


# ============ PAGE: BOX ============
if page == "📦 Box":
    st.header("📦 Box - последовательные преобразования")

    text = st.text_input("Строка с числом:", " 64", key="box_input")

    st.code(
        """wrap(text)
    .map(str.strip)
    .map(int)
    .map(lambda n: n + 1)
    .unwrap(chr)""",
        language="python",
    )

    if st.button("▶️ Выполнить", key="box_btn"):
        try:
            for idx, box in enumerate(box_trace(text)):
                st.write(f"{idx}. `{box!r}`")
            st.success(f"Результат: **{next_char_from_number(text)}**")
        except (ValueError, OverflowError) as exc:
            # Box не моделирует ошибки: исключение доходит до вызывающего
            st.error(f"❌ Исключение: {exc}")


# ============ PAGE: MAYBE ============
elif page == "❓ Maybe":
    st.header("❓ Maybe - значение может отсутствовать")

    names = {p.name: p for p in plants}
    selected = st.selectbox("🌿 Растение", list(names), key="maybe_plant")
    plant = names[selected]

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Latin name", plant.name)
        st.write(f"`from_nullable(plant.common_name)` → `{from_nullable(plant.common_name)!r}`")
    with col2:
        st.metric("Common name", plant_common_name(plant))

    st.divider()

    st.markdown("##### Поиск растения по ID")
    pid = st.text_input("ID растения:", "pl1", key="maybe_search")
    if st.button("Найти", key="maybe_btn"):
        found = find_plant(plants, pid)
        if found.is_some:
            st.success(f"✅ Найдено: **{found.value.name}**")
        else:
            st.warning(f"❌ Растение `{pid}` не найдено")


# ============ PAGE: RESULT ============
elif page == "⚖️ Result":
    st.header("⚖️ Result - ошибки как значения")

    by_name = {u.name: u for u in users}
    selected = st.selectbox("👤 Пользователь", list(by_name), key="result_user")
    user = by_name[selected]

    st.code(
        """success(user)
    .map(lambda u: u.id)
    .flat_map(lambda uid: lookup_posts(uid, posts))
    .fold(on_failure, on_success)""",
        language="python",
    )

    chain = success(user).map(lambda u: u.id).flat_map(lambda uid: lookup_posts(uid, posts))
    st.write(f"Цепочка до fold: `{chain!r}`")

    report = user_posts_report(user, posts)
    if chain.is_failure:
        st.error(f"❌ {report}")
    else:
        st.success(f"✅ Постов: {len(report)}")
        for post in report:
            st.write(f"• **{post.title}**")

    st.divider()

    st.markdown("##### Разбор числа (attempt)")
    raw = st.text_input("Число:", "42", key="result_parse")
    st.write(
        safe_parse_int(raw).fold(
            lambda err: f"❌ {err}",
            lambda n: f"✅ {n} → {wrap(n).map(lambda x: x * 2).unwrap()}",
        )
    )


# ============ PAGE: TESTS DEMO ============
elif page == "🧪 Tests Demo":
    st.header("🧪 Демонстрация тестов")

    st.markdown(
        """
    Для запуска тестов используйте команду:
    ```bash
    pytest -v
    ```
    """
    )

    st.divider()

    st.markdown("### 📋 Список тестов")
    tests = {
        "test_box.py": "Box, законы функтора",
        "test_maybe.py": "Maybe, короткое замыкание, ленивый fallback",
        "test_result.py": "Result, flat_map, fold",
        "test_compose.py": "compose / pipe",
        "test_lessons.py": "Сквозные сценарии из заметок",
    }

    for test_file, description in tests.items():
        st.success(f"✅ **{test_file}**: {description}")
