# modules/distributions.py

"""Histogram and boxplot data for the discharge and geometry plots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np

from utils.constants import HISTOGRAM_BINS

# Vectors shown in the four-panel view, in display order
PANEL_VECTORS = ("area_total", "velocity", "wetted_perimeter", "hydraulic_radius")


@dataclass(frozen=True)
class HistogramData:
    counts: np.ndarray
    edges: np.ndarray
    non_finite: int = 0

    @property
    def centers(self) -> np.ndarray:
        return (self.edges[:-1] + self.edges[1:]) / 2

    @property
    def widths(self) -> np.ndarray:
        return np.diff(self.edges)


@dataclass(frozen=True)
class BoxplotData:
    q1: float
    median: float
    q3: float
    mean: float
    lower_fence: float
    upper_fence: float
    lower_whisker: float
    upper_whisker: float
    outliers: np.ndarray

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1


def _finite(vector):
    vector = np.asarray(vector, dtype=float).ravel()
    mask = np.isfinite(vector)
    return vector[mask], int(vector.size - np.count_nonzero(mask))


def histogram_data(vector, bins: int = HISTOGRAM_BINS) -> HistogramData:
    """
    Bucket the finite values of ``vector`` into ``bins`` equal-width bins.

    A constant vector falls into a single unit-wide range centred on the
    value, following numpy's convention.
    """
    finite, non_finite = _finite(vector)
    counts, edges = np.histogram(finite, bins=bins)
    return HistogramData(counts=counts, edges=edges, non_finite=non_finite)


def histogram_panel(run, bins: int = HISTOGRAM_BINS) -> Dict[str, HistogramData]:
    """Histogram data for area, velocity, wetted perimeter and hydraulic radius of a run."""
    vectors = {
        "area_total": run.geometry.area_total,
        "velocity": run.hydraulics.velocity,
        "wetted_perimeter": run.geometry.wetted_perimeter,
        "hydraulic_radius": run.geometry.hydraulic_radius,
    }
    return {name: histogram_data(vectors[name], bins=bins) for name in PANEL_VECTORS}


def boxplot_data(vector, whisker: float = 1.5) -> BoxplotData:
    """
    Tukey boxplot statistics of the finite values of ``vector``.

    Whiskers reach the most extreme observations inside
    ``[Q1 - whisker * IQR, Q3 + whisker * IQR]``; points beyond are outliers.
    """
    finite, _ = _finite(vector)
    if finite.size == 0:
        nan = float("nan")
        return BoxplotData(nan, nan, nan, nan, nan, nan, nan, nan, np.array([]))

    q1, median, q3 = (float(q) for q in np.percentile(finite, [25, 50, 75]))
    spread = whisker * (q3 - q1)
    lower_fence, upper_fence = q1 - spread, q3 + spread
    inside = finite[(finite >= lower_fence) & (finite <= upper_fence)]
    outliers = finite[(finite < lower_fence) | (finite > upper_fence)]
    return BoxplotData(
        q1=q1,
        median=median,
        q3=q3,
        mean=float(finite.mean()),
        lower_fence=lower_fence,
        upper_fence=upper_fence,
        lower_whisker=float(inside.min()),
        upper_whisker=float(inside.max()),
        outliers=np.sort(outliers),
    )
