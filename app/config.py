"""Application-level configuration for the input controls."""

from __future__ import annotations

from typing import Any, Dict, List

from modules.sampler import InputRange

INPUT_VARIABLES: List[Dict[str, Any]] = [
    {
        "key": "n",
        "label": "Manning's n",
        "min": 0.000,
        "max": 0.300,
        "default": (0.03, 0.04),
        "step": 0.001,
        "format": "%.3f",
    },
    {
        "key": "top_width",
        "label": "Top Width (m)",
        "min": 1.0,
        "max": 1000.0,
        "default": (10.0, 20.0),
        "step": 1.0,
        "format": "%.0f",
    },
    {
        "key": "bottom_width",
        "label": "Bottom Width (m)",
        "min": 1.0,
        "max": 1000.0,
        "default": (5.0, 10.0),
        "step": 1.0,
        "format": "%.0f",
    },
    {
        "key": "depth",
        "label": "Depth (m)",
        "min": 0.2,
        "max": 100.0,
        "default": (1.0, 2.0),
        "step": 0.1,
        "format": "%.1f",
    },
    {
        "key": "bed_slope",
        "label": "Bed Slope (m/m)",
        "min": 0.0001,
        "max": 0.25,
        "default": (0.002, 0.005),
        "step": 0.0001,
        "format": "%.4f",
    },
]


def default_input_ranges() -> Dict[str, InputRange]:
    return {item["key"]: InputRange.from_pair(item["default"]) for item in INPUT_VARIABLES}
