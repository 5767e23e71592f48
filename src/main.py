import streamlit as st
from config.config import SETTINGS
from ui.state import ensure_state
from utils.constants import Pages
from utils.logging import setup_logging
from utils.styling import load_custom_css
from di.container import Container


def main():
    st.set_page_config(page_title="Adaptive Campus Navigator", page_icon="🧭", layout="wide")
    setup_logging(SETTINGS.log_level)
    ensure_state()
    load_custom_css()
    container = Container()

    st.sidebar.title("Navigation")
    selection = st.sidebar.radio(
        "Navigation",
        (
            Pages.NAVIGATOR.value["key"],
            Pages.CAMPUS_MAP.value["key"],
        ),
        format_func=lambda x: {
            Pages.NAVIGATOR.value["key"]: Pages.NAVIGATOR.value["title"],
            Pages.CAMPUS_MAP.value["key"]: Pages.CAMPUS_MAP.value["title"],
        }[x],
        label_visibility="hidden",
    )

    if selection == Pages.NAVIGATOR.value["key"]:
        container.navigator_page().render()
    elif selection == Pages.CAMPUS_MAP.value["key"]:
        container.map_page().render()


if __name__ == "__main__":
    main()
