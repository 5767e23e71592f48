import logging
import os
import streamlit as st
from streamlit.errors import StreamlitAPIException

logger = logging.getLogger(__name__)


def load_env_vars():
    try:
        secrets = dict(st.secrets)
    except (FileNotFoundError, StreamlitAPIException):
        logger.debug("No Streamlit secrets file, using environment only")
        return
    for k, v in secrets.items():
        if isinstance(v, str):
            os.environ.setdefault(k, v)
