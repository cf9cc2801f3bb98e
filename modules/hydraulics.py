# modules/hydraulics.py

"""Manning's equation applied elementwise to sampled channel properties."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HydraulicResult:
    velocity: np.ndarray
    discharge: np.ndarray

    def __post_init__(self):
        self.velocity.flags.writeable = False
        self.discharge.flags.writeable = False


def manning_velocity(hydraulic_radius, bed_slope, roughness):
    """Mean velocity (m/s): V = (1/n) * R^(2/3) * S^(1/2)."""
    hydraulic_radius = np.atleast_1d(np.asarray(hydraulic_radius, dtype=float))
    bed_slope = np.atleast_1d(np.asarray(bed_slope, dtype=float))
    roughness = np.atleast_1d(np.asarray(roughness, dtype=float))
    with np.errstate(divide="ignore", invalid="ignore"):
        return (1 / roughness) * (hydraulic_radius ** (2 / 3)) * (bed_slope ** 0.5)


def compute_hydraulics(hydraulic_radius, bed_slope, roughness, area_total) -> HydraulicResult:
    """
    Compute velocity and discharge for every trial.

    Zero roughness or a negative radius or slope produce non-finite values
    rather than an exception.
    """
    velocity = manning_velocity(hydraulic_radius, bed_slope, roughness)
    with np.errstate(invalid="ignore", over="ignore"):
        discharge = velocity * np.atleast_1d(np.asarray(area_total, dtype=float))

    non_finite = int(np.count_nonzero(~np.isfinite(discharge)))
    if non_finite:
        logger.warning("%d of %d trials produced a non-finite discharge", non_finite, discharge.size)
    return HydraulicResult(velocity=velocity, discharge=discharge)
