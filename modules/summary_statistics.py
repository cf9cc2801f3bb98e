# modules/summary_statistics.py

"""Five-number-plus-mean summary of a Monte Carlo output vector."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

SUMMARY_LABELS = ("Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max.")


@dataclass(frozen=True)
class SummaryStatistics:
    minimum: float
    q1: float
    median: float
    mean: float
    q3: float
    maximum: float
    non_finite: int = 0

    def values(self):
        return (self.minimum, self.q1, self.median, self.mean, self.q3, self.maximum)

    def to_series(self) -> pd.Series:
        return pd.Series(self.values(), index=list(SUMMARY_LABELS), dtype=float)


def summarize(vector) -> SummaryStatistics:
    """
    Summarise a sample vector.

    Non-finite values (NaN, +/-inf from degenerate channels) are left out of
    every statistic and reported through ``non_finite``. Quartiles use linear
    interpolation between order statistics.
    """
    vector = np.asarray(vector, dtype=float).ravel()
    finite = vector[np.isfinite(vector)]
    non_finite = int(vector.size - finite.size)

    if finite.size == 0:
        nan = float("nan")
        return SummaryStatistics(nan, nan, nan, nan, nan, nan, non_finite)

    q1, median, q3 = np.percentile(finite, [25, 50, 75])
    return SummaryStatistics(
        minimum=float(finite.min()),
        q1=float(q1),
        median=float(median),
        mean=float(finite.mean()),
        q3=float(q3),
        maximum=float(finite.max()),
        non_finite=non_finite,
    )


def format_summary(stats: SummaryStatistics, digits: int = 4) -> str:
    """Render the statistics as a two-line, right-aligned text block."""
    cells = [f"{value:.{digits}g}" for value in stats.values()]
    widths = [max(len(label), len(cell)) for label, cell in zip(SUMMARY_LABELS, cells)]
    header = " ".join(label.rjust(width) for label, width in zip(SUMMARY_LABELS, widths))
    row = " ".join(cell.rjust(width) for cell, width in zip(cells, widths))
    text = f"{header}\n{row}"
    if stats.non_finite:
        text += f"\n({stats.non_finite} non-finite values excluded)"
    return text
