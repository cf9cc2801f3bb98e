"""Presentation helpers for the Streamlit application."""

from __future__ import annotations

import streamlit as st

from modules.plots import discharge_overview_figure, four_panel_figure
from modules.summary_statistics import format_summary, summarize


def display_discharge_overview(run):
    """Histogram and boxplot of discharge followed by its summary statistics."""
    st.plotly_chart(discharge_overview_figure(run), width='stretch', key="discharge_overview")

    stats = summarize(run.discharge)
    st.code(format_summary(stats), language=None)
    if stats.non_finite:
        st.warning(
            f"{stats.non_finite} trials produced a non-finite discharge (zero roughness or a"
            " degenerate channel) and are excluded from the statistics and plots."
        )


def display_four_panel(run):
    st.plotly_chart(four_panel_figure(run), width='stretch', key="four_panel")
