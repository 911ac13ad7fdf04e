# ui_state.py
from typing import Optional

import streamlit as st

from hpi_core.normalize.series import SeriesIndex
from hpi_core.session import SessionState, initial_session

INDEX_KEY = "series_index"
SOURCE_KEY = "series_source"
SESSION_KEY = "hpi_session"


def get_series_index() -> Optional[SeriesIndex]:
    return st.session_state.get(INDEX_KEY)


def put_series_index(index: SeriesIndex, source_label: str) -> None:
    """Store a freshly loaded index and reset the session to its defaults."""
    st.session_state[INDEX_KEY] = index
    st.session_state[SOURCE_KEY] = source_label
    st.session_state[SESSION_KEY] = initial_session(index)


def clear_series_index() -> None:
    for k in (INDEX_KEY, SOURCE_KEY, SESSION_KEY):
        st.session_state.pop(k, None)


def require_series_index() -> SeriesIndex:
    index = get_series_index()
    if index is None:
        st.warning("Please load a price-index file on the **Home** page first.")
        st.page_link("pages/01_Home.py", label="Open Home", icon=":material/upload_file:")
        st.stop()
    return index


def get_session(index: SeriesIndex) -> SessionState:
    state = st.session_state.get(SESSION_KEY)
    if state is None:
        state = initial_session(index)
        st.session_state[SESSION_KEY] = state
    return state


def put_session(state: SessionState) -> None:
    st.session_state[SESSION_KEY] = state
