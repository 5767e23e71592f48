import streamlit as st
from langchain_core.messages import AIMessage
from config.config import SETTINGS
from utils.constants import GREETING_MESSAGE, STATE_KEYS


@st.cache_data(ttl=3600)
def _fetch_state_data():
    """Fetch current session state for persistence."""
    return {k: st.session_state[k] for k in STATE_KEYS}


def load_state_from_cache():
    """Restore state values from cache into session state."""
    saved_state = _fetch_state_data()
    for k in STATE_KEYS:
        st.session_state[k] = saved_state[k]


def save_state_to_cache():
    """Save current session state into cache."""
    _fetch_state_data.clear()
    _fetch_state_data()


def ensure_state():
    """Ensure default state values exist, then load cached state."""
    defaults = {
        "navigator_messages": [AIMessage(content=GREETING_MESSAGE)],
        "navigator_turn": "human",
        "highlighted_location": None,
        "from_location": None,
        "to_location": None,
        "persona": SETTINGS.default_persona,
        "show_legend": True,
    }
    for key, value in defaults.items():
        st.session_state.setdefault(key, value)

    load_state_from_cache()
