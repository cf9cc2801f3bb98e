# modules/plots.py

"""Plotly figures for the discharge overview and the four-panel geometry view."""

from __future__ import annotations

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from modules.distributions import (
    PANEL_VECTORS,
    BoxplotData,
    HistogramData,
    boxplot_data,
    histogram_data,
    histogram_panel,
)
from utils.constants import HISTOGRAM_BINS

PANEL_STYLES = {
    "area_total": {"title": "Histogram of Area", "xlabel": "Area (sq. m)", "color": "blue"},
    "velocity": {"title": "Histogram of Velocity", "xlabel": "Velocity (m/s)", "color": "red"},
    "wetted_perimeter": {
        "title": "Histogram of Wetted Perimeter",
        "xlabel": "Wetted Perimeter (m)",
        "color": "green",
    },
    "hydraulic_radius": {
        "title": "Histogram of Hydraulic Radius",
        "xlabel": "Hydraulic Radius",
        "color": "purple",
    },
}


def histogram_trace(hist: HistogramData, name: str, color: str = "lightgray") -> go.Bar:
    """Bar trace drawing precomputed histogram bins edge to edge."""
    return go.Bar(
        x=hist.centers,
        y=hist.counts,
        width=hist.widths,
        name=name,
        marker=dict(color=color, line=dict(color="black", width=1)),
        hovertemplate="%{x:.4g}: %{y}<extra></extra>",
        showlegend=False,
    )


def boxplot_traces(box: BoxplotData, name: str):
    """Precomputed box trace plus a marker trace for the outliers."""
    traces = [
        go.Box(
            x=[name],
            q1=[box.q1],
            median=[box.median],
            q3=[box.q3],
            mean=[box.mean],
            lowerfence=[box.lower_whisker],
            upperfence=[box.upper_whisker],
            name=name,
            marker_color="steelblue",
            showlegend=False,
        )
    ]
    if box.outliers.size:
        traces.append(
            go.Scatter(
                x=[name] * box.outliers.size,
                y=box.outliers,
                mode="markers",
                marker=dict(color="steelblue", symbol="circle-open"),
                name="Outliers",
                showlegend=False,
            )
        )
    return traces


def discharge_overview_figure(run, bins: int = HISTOGRAM_BINS) -> go.Figure:
    """Histogram and boxplot of discharge, side by side."""
    hist = histogram_data(run.discharge, bins=bins)
    box = boxplot_data(run.discharge)

    fig = make_subplots(
        rows=1,
        cols=2,
        subplot_titles=("Histogram of Q (CUMECS)", "Boxplot of Q (CUMECS)"),
    )
    fig.add_trace(histogram_trace(hist, "Q"), row=1, col=1)
    for trace in boxplot_traces(box, "Q"):
        fig.add_trace(trace, row=1, col=2)

    fig.update_xaxes(title_text="Q (CUMECS)", row=1, col=1)
    fig.update_yaxes(title_text="Frequency", row=1, col=1)
    fig.update_yaxes(title_text="Q (CUMECS)", row=1, col=2)
    fig.update_layout(height=450, bargap=0, template="plotly_white")
    return fig


def four_panel_figure(run, bins: int = HISTOGRAM_BINS) -> go.Figure:
    """2 x 2 grid of histograms for area, velocity, wetted perimeter and hydraulic radius."""
    panel = histogram_panel(run, bins=bins)
    fig = make_subplots(
        rows=2,
        cols=2,
        subplot_titles=[PANEL_STYLES[name]["title"] for name in PANEL_VECTORS],
    )
    for idx, name in enumerate(PANEL_VECTORS):
        row, col = divmod(idx, 2)
        style = PANEL_STYLES[name]
        fig.add_trace(histogram_trace(panel[name], name, style["color"]), row=row + 1, col=col + 1)
        fig.update_xaxes(title_text=style["xlabel"], row=row + 1, col=col + 1)
        fig.update_yaxes(title_text="Frequency", row=row + 1, col=col + 1)

    fig.update_layout(height=700, bargap=0, template="plotly_white")
    return fig
