"""Piecewise linear interpolation over utilization -> rate curves."""

import math
from bisect import bisect_left, bisect_right
from typing import Iterable, List, Sequence, Tuple

from lendcurves.core.constants import CURVE_EPSILON, PERCENT
from lendcurves.core.exceptions import (
    DegenerateCurveError,
    ExtrapolationError,
    NonMonotonicCurveError,
)
from lendcurves.core.models import CurvePoint

Curve = Sequence[Tuple[float, float]]


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp x into [lo, hi]; non-finite x maps to lo."""
    if not math.isfinite(x):
        return lo
    return min(hi, max(lo, x))


def normalize_curve(points: Iterable[Tuple[float, float]]) -> List[CurvePoint]:
    """Clamp utilization to [0, 100], sort ascending and de-dupe equal utilizations (last wins)."""
    pts = sorted(
        (CurvePoint(clamp(float(u), 0.0, PERCENT), float(r)) for u, r in points),
        key=lambda p: p.utilization,
    )

    out: List[CurvePoint] = []
    for p in pts:
        if out and out[-1].utilization == p.utilization:
            out[-1] = p
        else:
            out.append(p)
    return out


def interpolate(curve: Curve, x: float) -> float:
    """
    Linear interpolation with clamping at both ends.

    The curve must already be sorted and de-duplicated (see normalize_curve).
    Values left of the first knot return the first rate, values right of the
    last knot return the last rate; nothing is extrapolated.

    Raises:
        DegenerateCurveError: curve has fewer than two points
    """
    if len(curve) < 2:
        raise DegenerateCurveError(len(curve))

    first_x, first_y = curve[0]
    last_x, last_y = curve[-1]
    if x <= first_x:
        return first_y
    if x >= last_x:
        return last_y

    xs = [p[0] for p in curve]
    hi = bisect_right(xs, x)
    x0, y0 = curve[hi - 1]
    x1, y1 = curve[hi]
    t = (x - x0) / max(CURVE_EPSILON, x1 - x0)
    return y0 + t * (y1 - y0)


def check_monotonic(curve: Curve) -> None:
    """Raise NonMonotonicCurveError unless utilization strictly increases and rate never decreases."""
    for (x0, y0), (x1, y1) in zip(curve, curve[1:]):
        if x1 <= x0 or y1 < y0:
            raise NonMonotonicCurveError(x0, y0, x1, y1)


def interpolate_strict(curve: Curve, x: float, upper: float = 1.0) -> float:
    """
    Interpolate a protocol-supplied curve, failing instead of clamping.

    x above `upper` (the top of the utilization scale) is capped to `upper`.
    Anything still outside the curve's own domain is an error, as is a
    curve that is degenerate or not increasing.

    Args:
        curve: Sorted (utilization, rate) points
        x: Utilization on the same scale as the curve
        upper: Largest meaningful utilization (1.0 for fractions)

    Returns:
        Interpolated rate; exact knot hits return the knot's rate

    Raises:
        DegenerateCurveError: fewer than two points
        NonMonotonicCurveError: consecutive points not increasing
        ExtrapolationError: x outside [first knot, last knot]
    """
    if len(curve) < 2:
        raise DegenerateCurveError(len(curve))
    check_monotonic(curve)

    lower, top = curve[0][0], curve[-1][0]
    if not math.isfinite(x):
        raise ExtrapolationError(x, lower, top)
    if x > upper:
        x = upper
    if x < lower or x > top:
        raise ExtrapolationError(x, lower, top)

    xs = [p[0] for p in curve]
    i = bisect_left(xs, x)
    if xs[i] == x:
        return curve[i][1]

    x0, y0 = curve[i - 1]
    x1, y1 = curve[i]
    return y0 + (x - x0) * (y1 - y0) / (x1 - x0)
