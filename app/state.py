"""Centralized Streamlit session state helpers."""

from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from app.config import default_input_ranges
from modules.sampler import InputRange

_STATE_FACTORIES = {
    "input_ranges": default_input_ranges,
    "manning_run": lambda: None,
    "run_snapshot": lambda: None,
}


def init_session_state() -> None:
    """Ensure all known keys exist in ``st.session_state``."""
    for key, factory in _STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()


def get_input_ranges() -> Dict[str, InputRange]:
    init_session_state()
    return st.session_state.input_ranges


def set_input_ranges(ranges: Dict[str, InputRange]) -> None:
    init_session_state()
    st.session_state.input_ranges = dict(ranges)


def get_manning_run() -> Any:
    init_session_state()
    return st.session_state.manning_run


def get_run_snapshot() -> Any:
    init_session_state()
    return st.session_state.run_snapshot


def set_manning_run(run: Any, snapshot: Any) -> None:
    init_session_state()
    st.session_state.manning_run = run
    st.session_state.run_snapshot = snapshot
