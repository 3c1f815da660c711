"""Utilization grid used to sample every rate curve."""

import math
from typing import Any, List

import numpy as np

from lendcurves.core.constants import GRID_DECIMALS, PERCENT


def build_grid(count: Any) -> List[float]:
    """
    Build an evenly spaced utilization grid over [0, 100].

    value[i] = round(i * 100 / (count - 1), 6)

    The rounding only suppresses floating point drift (33.33333333337 ->
    33.333333). Non-numeric or non-finite counts are treated as 0; the count
    is floored and clamped to a minimum of 2, so the result always starts at
    exactly 0 and ends at exactly 100.

    Args:
        count: Number of grid points

    Returns:
        List of utilization percent points
    """
    try:
        n = float(count)
    except (TypeError, ValueError):
        n = 0.0
    if not math.isfinite(n):
        n = 0.0
    n = max(2, math.floor(n))

    step = PERCENT / (n - 1)
    return np.round(np.arange(n) * step, GRID_DECIMALS).tolist()
