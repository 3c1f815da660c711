"""Exception hierarchy for lendcurves."""


class LendCurvesError(Exception):
    """Base class for all lendcurves errors."""


class CurveError(LendCurvesError, ValueError):
    """A rate curve cannot be evaluated."""


class DegenerateCurveError(CurveError):
    """Curve has fewer than two points."""

    def __init__(self, points: int):
        super().__init__(f"Degenerate curve: need at least 2 points, got {points}")
        self.points = points


class NonMonotonicCurveError(CurveError):
    """Consecutive points are not increasing in utilization or decrease in rate."""

    def __init__(self, x0: float, y0: float, x1: float, y1: float):
        super().__init__(
            f"Non-monotonic curve between ({x0}, {y0}) and ({x1}, {y1})"
        )
        self.segment = ((x0, y0), (x1, y1))


class ExtrapolationError(CurveError):
    """Requested utilization lies outside the curve's domain."""

    def __init__(self, x: float, lower: float, upper: float):
        super().__init__(f"Cannot extrapolate: {x} outside [{lower}, {upper}]")
        self.x = x


class InvalidBreakpointError(CurveError):
    """A basis-point breakpoint is out of range."""


class RpcError(LendCurvesError):
    """JSON-RPC endpoint returned an error payload."""
