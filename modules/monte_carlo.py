# modules/monte_carlo.py

"""
Monte Carlo propagation of input uncertainty through Manning's equation.

One call to ``run_manning_simulation`` is one complete, independent run:
sampling, geometry, hydraulics and table assembly, in that order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import numpy as np
import pandas as pd

from modules.geometry import ChannelGeometry, compute_geometry
from modules.hydraulics import HydraulicResult, compute_hydraulics
from modules.result_table import build_result_table
from modules.sampler import INPUT_NAMES, InputRange, fresh_seed, sample_inputs
from utils.constants import SAMPLE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManningRun:
    """All vectors and the result table of one Monte Carlo run."""

    ranges: Dict[str, InputRange]
    sample_size: int
    seed: int
    inputs: Dict[str, np.ndarray]
    geometry: ChannelGeometry
    hydraulics: HydraulicResult
    table: pd.DataFrame

    @property
    def discharge(self) -> np.ndarray:
        return self.hydraulics.discharge


def coerce_ranges(ranges: Mapping) -> Dict[str, InputRange]:
    """Accept ``InputRange`` objects or ``(min, max)`` pairs keyed by input name."""
    coerced = {}
    for name in INPUT_NAMES:
        if name not in ranges:
            raise ValueError(f"Missing input range for '{name}'")
        value = ranges[name]
        coerced[name] = value if isinstance(value, InputRange) else InputRange.from_pair(value)
    return coerced


def run_manning_simulation(
    ranges: Mapping,
    N: int = SAMPLE_SIZE,
    seed: Optional[int] = None,
) -> ManningRun:
    """
    Run the full sampling and propagation pipeline.

    Parameters
    ----------
    ranges : mapping
        Input name -> ``InputRange`` or ``(min, max)`` pair for
        n, top_width, bottom_width, depth and bed_slope.
    N : int
        Number of Monte Carlo trials, 10,000 by default.
    seed : int, optional
        Seed for reproducible sampling; a fresh one is drawn when omitted.

    Returns
    -------
    ManningRun
    """
    ranges = coerce_ranges(ranges)
    if seed is None:
        seed = fresh_seed()

    inputs = sample_inputs(ranges, N, seed=seed)
    geometry = compute_geometry(inputs["top_width"], inputs["bottom_width"], inputs["depth"])
    hydraulics = compute_hydraulics(
        geometry.hydraulic_radius,
        inputs["bed_slope"],
        inputs["n"],
        geometry.area_total,
    )
    table = build_result_table(
        inputs,
        {
            "area": geometry.area_total,
            "wetted_perimeter": geometry.wetted_perimeter,
            "hydraulic_radius": geometry.hydraulic_radius,
            "velocity": hydraulics.velocity,
            "discharge": hydraulics.discharge,
        },
    )

    logger.info("Completed Manning Monte Carlo run: N=%d, seed=%d", N, seed)
    return ManningRun(
        ranges=ranges,
        sample_size=N,
        seed=seed,
        inputs=inputs,
        geometry=geometry,
        hydraulics=hydraulics,
        table=table,
    )
