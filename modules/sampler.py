# modules/sampler.py

"""
Uniform sampling of the five Manning's equation inputs.

Every input variable is sampled exactly once per run; downstream stages
reuse the returned vectors instead of drawing again.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import numpy as np
import openturns as ot

logger = logging.getLogger(__name__)

# OpenTURNS has one process-wide generator; seeding and drawing must not interleave
_GENERATOR_LOCK = threading.Lock()

# Sampling order is fixed so that a given seed always maps to the same vectors
INPUT_NAMES = ("n", "top_width", "bottom_width", "depth", "bed_slope")


@dataclass(frozen=True)
class InputRange:
    """Closed interval ``[minimum, maximum]`` for one uncertain input."""

    minimum: float
    maximum: float

    @classmethod
    def from_pair(cls, pair) -> "InputRange":
        low, high = pair
        return cls(float(low), float(high))

    @property
    def is_degenerate(self) -> bool:
        return self.minimum == self.maximum


def _freeze(vector: np.ndarray) -> np.ndarray:
    vector.flags.writeable = False
    return vector


def sample(input_range: InputRange, count: int) -> np.ndarray:
    """
    Draw ``count`` independent values from Uniform(minimum, maximum).

    Parameters
    ----------
    input_range : InputRange
        Bounds of the uniform distribution. ``minimum <= maximum`` is the
        caller's responsibility.
    count : int
        Number of Monte Carlo trials.

    Returns
    -------
    numpy.ndarray
        Read-only float vector of length ``count``.
    """
    if input_range.is_degenerate:
        # OpenTURNS rejects Uniform(a, a); the constant vector is the same draw
        return _freeze(np.full(count, input_range.minimum, dtype=float))

    distribution = ot.Uniform(input_range.minimum, input_range.maximum)
    return _freeze(np.array(distribution.getSample(count), dtype=float).ravel())


def fresh_seed() -> int:
    """Return a seed drawn from OS entropy, within OpenTURNS' unsigned 32-bit range."""
    return int(np.random.SeedSequence().generate_state(1)[0])


def sample_inputs(
    ranges: Mapping[str, InputRange],
    count: int,
    seed: Optional[int] = None,
) -> Dict[str, np.ndarray]:
    """
    Sample every Manning input once.

    Parameters
    ----------
    ranges : mapping
        One ``InputRange`` per name in ``INPUT_NAMES``.
    count : int
        Number of Monte Carlo trials.
    seed : int, optional
        Seed of the OpenTURNS random generator. ``None`` draws a fresh seed
        so that unseeded runs are independent of each other.

    Returns
    -------
    dict
        Input name -> sample vector, all of length ``count``.

    Raises
    ------
    ValueError
        If a range is missing for one of the inputs.
    """
    missing = [name for name in INPUT_NAMES if name not in ranges]
    if missing:
        raise ValueError(f"Missing input ranges for: {', '.join(missing)}")

    if seed is None:
        seed = fresh_seed()
    logger.debug("Sampling %d trials per input with seed %d", count, seed)
    with _GENERATOR_LOCK:
        ot.RandomGenerator.SetSeed(seed)
        return {name: sample(ranges[name], count) for name in INPUT_NAMES}
