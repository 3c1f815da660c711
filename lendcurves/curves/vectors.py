"""Curve vector builder."""

from typing import Sequence

import numpy as np

from lendcurves.core.constants import PERCENT
from lendcurves.core.models import CurveVectors
from lendcurves.curves.base import RateModel


def sanitize_vectors(
    knots: Sequence[float],
    borrow_rates: Sequence[float],
    lending_rates: Sequence[float],
) -> CurveVectors:
    """Trim the three vectors to their shortest common length and clamp knots into [0, 100]."""
    n = min(len(knots), len(borrow_rates), len(lending_rates))
    aligned = np.clip(np.asarray(list(knots)[:n], dtype=float), 0.0, PERCENT)
    return CurveVectors(
        knots=aligned.tolist(),
        borrow_rates=[float(r) for r in list(borrow_rates)[:n]],
        lending_rates=[float(r) for r in list(lending_rates)[:n]],
    )


def build_vectors(model: RateModel, grid: Sequence[float]) -> CurveVectors:
    """Sample a rate model over the utilization grid and sanitize the result."""
    raw = model.curve_vectors(grid)
    return sanitize_vectors(raw.knots, raw.borrow_rates, raw.lending_rates)
