"""Application-level orchestration helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from app.state import get_manning_run, get_run_snapshot, set_manning_run
from modules.monte_carlo import ManningRun, run_manning_simulation
from modules.sampler import INPUT_NAMES, InputRange
from utils.constants import SAMPLE_SIZE

logger = logging.getLogger(__name__)


def input_snapshot(ranges: Dict[str, InputRange], seed: Optional[int]) -> Tuple[Any, ...]:
    """Hashable snapshot of everything a run depends on."""
    bounds = tuple((ranges[name].minimum, ranges[name].maximum) for name in INPUT_NAMES)
    return bounds + (seed,)


def ensure_manning_run(
    ranges: Dict[str, InputRange],
    seed: Optional[int] = None,
    sample_size: int = SAMPLE_SIZE,
) -> ManningRun:
    """
    Return the run for the current inputs, recomputing it when they changed.

    Any change to a range or to the seed replaces the stored run wholesale.
    Without a fixed seed, an unchanged snapshot keeps its run so that widget
    interactions unrelated to the inputs do not resample.
    """
    snapshot = input_snapshot(ranges, seed)
    run = get_manning_run()
    if run is None or get_run_snapshot() != snapshot:
        logger.debug("Input snapshot changed, starting a new run")
        run = run_manning_simulation(ranges, N=sample_size, seed=seed)
        set_manning_run(run, snapshot)
    return run
