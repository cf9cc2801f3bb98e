# modules/result_table.py

"""Assembly of the per-trial result table exported as CSV."""

from __future__ import annotations

from typing import Mapping

import numpy as np
import pandas as pd

INPUT_COLUMNS = {
    "n": "n",
    "top_width": "TopWidth",
    "bottom_width": "BottomWidth",
    "depth": "Depth",
    "bed_slope": "BedSlope",
}

DERIVED_COLUMNS = {
    "area": "Area",
    "wetted_perimeter": "WettedPerimeter",
    "hydraulic_radius": "HydraulicRadius",
    "velocity": "Velocity",
    "discharge": "Discharge",
}

RESULT_COLUMNS = list(INPUT_COLUMNS.values()) + list(DERIVED_COLUMNS.values())


def build_result_table(
    inputs: Mapping[str, np.ndarray],
    derived: Mapping[str, np.ndarray],
) -> pd.DataFrame:
    """
    Zip the five input vectors and five derived vectors into one table.

    Parameters
    ----------
    inputs : mapping
        Sample vectors keyed as in ``INPUT_COLUMNS``.
    derived : mapping
        Derived vectors keyed as in ``DERIVED_COLUMNS``.

    Returns
    -------
    pandas.DataFrame
        One row per trial, indexed 1..N, columns in ``RESULT_COLUMNS`` order.

    Raises
    ------
    ValueError
        If a vector is missing or the vectors do not share one length.
    """
    columns = {}
    for source, mapping in ((inputs, INPUT_COLUMNS), (derived, DERIVED_COLUMNS)):
        for key, column in mapping.items():
            if key not in source:
                raise ValueError(f"Missing vector '{key}' for column '{column}'")
            columns[column] = np.asarray(source[key], dtype=float)

    lengths = {column: vector.size for column, vector in columns.items()}
    if len(set(lengths.values())) != 1:
        raise ValueError(f"Sample vectors are not aligned: {lengths}")

    size = next(iter(lengths.values()))
    table = pd.DataFrame(columns, columns=RESULT_COLUMNS)
    table.index = pd.RangeIndex(1, size + 1)
    return table
