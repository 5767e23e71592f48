import streamlit as st

from utils.constants import MARKER_COLORS, PERSONA_COLORS, PERSONA_LABELS

SIDEBAR_CUSTOM_CSS = """
<style>
section[data-testid="stSidebar"] {
    min-width: 240px;
    width: fit-content;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"] {
    font-size: 16px;
    font-weight: 500;
    padding: 12px 8px;
    border-radius: 8px;
    margin-bottom: 4px;
    transition: background 0.2s;
    width: 100%;
    display: block;
    box-sizing: border-box;
    min-width: 0;
    background: transparent;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] label[data-baseweb="radio"] > div:first-child {
    display: none;
}

section[data-testid="stSidebar"] label[data-testid="stWidgetLabel"] {
    display: none;
}
</style>
"""

SIDEBAR_HIGHLIGHT_CUSTOM_CSS_DARK_MODE = """
<style>
section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"]:has(input:checked) {
    background: #0e1117;
    color: #fff !important;
}
</style>
"""

SIDEBAR_HIGHLIGHT_CUSTOM_CSS_LIGHT_MODE = """
<style>
section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"]:has(input:checked) {
    background: #d0d0d0;
    color: #222 !important;
}
</style>
"""

LEGEND_CSS = """
<style>
.legend-item { display: inline-flex; align-items: center; gap: 6px; margin: 2px 12px 2px 0; font-size: 13px; }
.legend-dot { width: 12px; height: 12px; border-radius: 50%; display: inline-block; }
</style>
"""


def load_custom_css():
    st.markdown(SIDEBAR_CUSTOM_CSS + LEGEND_CSS, unsafe_allow_html=True)
    if st.context.theme.type == "dark":
        st.markdown(SIDEBAR_HIGHLIGHT_CUSTOM_CSS_DARK_MODE, unsafe_allow_html=True)
    else:
        st.markdown(SIDEBAR_HIGHLIGHT_CUSTOM_CSS_LIGHT_MODE, unsafe_allow_html=True)


def _legend_items(colors: dict, labels: dict) -> str:
    return "".join(
        f'<span class="legend-item"><span class="legend-dot" '
        f'style="background-color: {color};"></span>{labels.get(key, key.title())}</span>'
        for key, color in colors.items()
    )


def legend_html() -> str:
    location_types = {k: v for k, v in MARKER_COLORS.items() if k != "default"}
    return (
        "<p><strong>Location Types</strong></p>"
        f"<div>{_legend_items(location_types, {})}</div>"
        "<p><strong>Navigation Styles</strong></p>"
        f"<div>{_legend_items(PERSONA_COLORS, PERSONA_LABELS)}</div>"
    )
