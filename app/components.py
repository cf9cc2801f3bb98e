"""Reusable UI components for the Streamlit application."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import streamlit as st

from app.config import INPUT_VARIABLES
from app.state import (
    get_input_ranges,
    init_session_state,
    set_input_ranges,
)
from modules.export import result_table_to_csv
from modules.sampler import InputRange
from utils.constants import CSV_FILENAME, DEFAULT_SEED, SAMPLE_SIZE
from utils.css_styles import load_css


def render_app_shell() -> None:
    """Render global UI chrome: styles, title and introduction."""
    init_session_state()

    st.markdown(load_css(), unsafe_allow_html=True)
    st.title("Monte Carlo Analysis of Manning's Equation")
    st.write(
        "An app demonstrating impacts of input value uncertainty on results of Manning's equation"
        " for open channel flow using Monte Carlo analysis. See notes at bottom of screen for details."
    )


def render_input_sidebar() -> Tuple[Dict[str, InputRange], Optional[int]]:
    """Render the input sliders and seed controls; return the ranges and the seed to use."""
    init_session_state()
    current = get_input_ranges()

    st.sidebar.header("Input Variables")
    ranges = {}
    for item in INPUT_VARIABLES:
        stored = current[item["key"]]
        low, high = st.sidebar.slider(
            item["label"],
            min_value=item["min"],
            max_value=item["max"],
            value=(stored.minimum, stored.maximum),
            step=item["step"],
            format=item["format"],
            key=f"slider_{item['key']}",
        )
        ranges[item["key"]] = InputRange(low, high)
    set_input_ranges(ranges)

    st.sidebar.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)
    use_fixed_seed = st.sidebar.checkbox(
        "Fix random seed",
        value=False,
        key="use_fixed_seed_checkbox",
        help="Reuse the same random draws so a run can be reproduced.",
    )
    seed = st.sidebar.number_input(
        "Seed",
        min_value=0,
        max_value=2**32 - 1,
        value=DEFAULT_SEED,
        step=1,
        key="seed_input",
        disabled=not use_fixed_seed,
    )
    return ranges, (int(seed) if use_fixed_seed else None)


def render_download_button(run) -> None:
    """Offer the result table of ``run`` as a CSV download in the sidebar."""
    st.sidebar.download_button(
        "Download csv file",
        data=result_table_to_csv(run.table),
        file_name=CSV_FILENAME,
        mime="text/csv",
        key="download_csv",
    )


def render_notes() -> None:
    """Render the method notes, credits and suggested citation."""
    st.markdown("---")
    st.markdown(
        f"""
        - All distributions are uniform distributions with minimum and maximum values set by the slider bars.
        - Input variable vectors have a length of {SAMPLE_SIZE:,} corresponding to {SAMPLE_SIZE:,} Monte Carlo iterations.
        - Computation assumes a symmetrical trapezoidal channel.
        - Bottom width should be less than top width for reasonable results.
        """
    )
    st.markdown(
        "[More about Manning's Equation.](https://en.wikipedia.org/wiki/Manning_formula)  \n"
        "[More about Monte Carlo method](https://en.wikipedia.org/wiki/Monte_Carlo_method)"
    )
    st.caption(
        "Programmed by John Yagecic, P.E. in US customary units. "
        "Adapted to metric units by Mike Spencer (http://mikerspencer.com)."
    )
    st.markdown(
        "If you use this product or the underlying code in any professional or academic product, "
        "please consider using a citation such as:\n\n"
        "> Yagecic, John, July 2016. Monte Carlo Analysis of Manning's Equation: a web app "
        "demonstrating impacts of input value uncertainty on results of Manning's equation for "
        "open channel flow using Monte Carlo analysis."
    )
