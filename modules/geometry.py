# modules/geometry.py

"""Cross-section geometry of a symmetric trapezoidal channel, vectorised over trials."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChannelGeometry:
    """Derived geometry vectors, aligned by trial index."""

    adj: np.ndarray
    opp: np.ndarray
    hyp: np.ndarray
    area_side: np.ndarray
    area_total: np.ndarray
    wetted_perimeter: np.ndarray
    hydraulic_radius: np.ndarray

    def __post_init__(self):
        for vector in vars(self).values():
            vector.flags.writeable = False


def compute_geometry(top_width, bottom_width, depth) -> ChannelGeometry:
    """
    Compute the trapezoid geometry for every trial.

    Each side slope is treated as a right triangle whose horizontal leg
    (``adj``) is half the difference between top and bottom width and whose
    vertical leg (``opp``) is the depth.

    Parameters
    ----------
    top_width, bottom_width, depth : array_like
        Sample vectors of equal length; scalars are treated as one trial.

    Returns
    -------
    ChannelGeometry
        A zero wetted perimeter gives an infinite or NaN hydraulic radius;
        no exception is raised.
    """
    top_width = np.atleast_1d(np.asarray(top_width, dtype=float))
    bottom_width = np.atleast_1d(np.asarray(bottom_width, dtype=float))
    depth = np.atleast_1d(np.asarray(depth, dtype=float))

    adj = (top_width - bottom_width) / 2
    opp = depth.copy()
    hyp = np.sqrt(adj ** 2 + opp ** 2)
    area_side = 0.5 * adj * opp
    area_total = depth * bottom_width + 2 * area_side
    wetted_perimeter = bottom_width + 2 * hyp
    with np.errstate(divide="ignore", invalid="ignore"):
        hydraulic_radius = area_total / wetted_perimeter

    logger.debug("Computed channel geometry for %d trials", adj.size)
    return ChannelGeometry(
        adj=adj,
        opp=opp,
        hyp=hyp,
        area_side=area_side,
        area_total=area_total,
        wetted_perimeter=wetted_perimeter,
        hydraulic_radius=hydraulic_radius,
    )
