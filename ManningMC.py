import streamlit as st

from app.components import (
    render_app_shell,
    render_download_button,
    render_input_sidebar,
    render_notes,
)
from app.core import ensure_manning_run
from app.displays import display_discharge_overview, display_four_panel
from app.state import init_session_state
from utils.logging_config import setup_logging


st.set_page_config(
    page_title="ManningMC | Monte Carlo Analysis of Manning's Equation",
    page_icon="🌊",
    layout="wide",
    initial_sidebar_state="expanded",
)


def main():
    setup_logging()
    init_session_state()

    render_app_shell()
    ranges, seed = render_input_sidebar()

    try:
        with st.spinner("Running Monte Carlo simulation..."):
            run = ensure_manning_run(ranges, seed=seed)
    except Exception as exc:
        st.error(f"Error running the Monte Carlo simulation: {exc}")
        return

    render_download_button(run)
    display_discharge_overview(run)
    display_four_panel(run)
    render_notes()


if __name__ == "__main__":
    main()
