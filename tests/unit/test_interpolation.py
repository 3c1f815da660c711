"""Unit tests for curve interpolation."""

import math

import pytest

from lendcurves.core.exceptions import (
    CurveError,
    DegenerateCurveError,
    ExtrapolationError,
    NonMonotonicCurveError,
)
from lendcurves.curves.interpolation import (
    check_monotonic,
    clamp,
    interpolate,
    interpolate_strict,
    normalize_curve,
)


class TestClamp:
    """Tests for clamp."""

    def test_inside(self):
        assert clamp(0.5, 0.0, 1.0) == 0.5

    def test_above(self):
        assert clamp(5.0, 0.0, 1.0) == 1.0

    def test_below(self):
        assert clamp(-1.0, 0.0, 1.0) == 0.0

    def test_non_finite_maps_to_lower_bound(self):
        assert clamp(float("nan"), 0.0, 1.0) == 0.0
        assert clamp(float("inf"), 0.0, 1.0) == 0.0


class TestNormalizeCurve:
    """Tests for normalize_curve."""

    def test_sorts_and_dedupes_last_wins(self):
        curve = normalize_curve([(50, 5), (0, 0), (50, 6)])
        assert curve == [(0.0, 0.0), (50.0, 6.0)]

    def test_clamps_utilization(self):
        curve = normalize_curve([(-10, 1), (150, 10)])
        assert curve == [(0.0, 1.0), (100.0, 10.0)]


class TestInterpolate:
    """Tests for the lenient interpolator."""

    @pytest.fixture
    def curve(self):
        return [(0.0, 0.0), (100.0, 10.0)]

    def test_midpoint(self, curve):
        assert interpolate(curve, 50) == 5.0

    def test_between_knots(self):
        assert interpolate([(0.0, 1.0), (50.0, 5.0)], 25) == 3.0

    def test_left_clamp(self, curve):
        assert interpolate(curve, -10) == 0.0

    def test_right_clamp(self, curve):
        assert interpolate(curve, 200) == 10.0

    def test_exact_knot(self):
        curve = [(0.0, 0.0), (80.0, 8.0), (100.0, 50.0)]
        assert interpolate(curve, 80) == 8.0

    def test_duplicate_knots_do_not_divide_by_zero(self):
        curve = [(0.0, 0.0), (50.0, 1.0), (50.0, 2.0), (100.0, 3.0)]
        assert math.isfinite(interpolate(curve, 50))

    @pytest.mark.parametrize("curve", [[], [(50.0, 1.0)]])
    def test_degenerate(self, curve):
        with pytest.raises(DegenerateCurveError):
            interpolate(curve, 10)


class TestInterpolateStrict:
    """Tests for the strict interpolator."""

    @pytest.fixture
    def curve(self):
        return [(0.0, 0.0), (0.8, 0.1), (1.0, 0.5)]

    def test_exact_knot_returns_knot_rate(self, curve):
        assert interpolate_strict(curve, 0.8) == 0.1

    def test_between_knots(self, curve):
        assert interpolate_strict(curve, 0.9) == pytest.approx(0.3)
        assert interpolate_strict(curve, 0.4) == pytest.approx(0.05)

    def test_endpoints(self, curve):
        assert interpolate_strict(curve, 0.0) == 0.0
        assert interpolate_strict(curve, 1.0) == 0.5

    def test_above_scale_is_capped(self, curve):
        assert interpolate_strict(curve, 1.5) == 0.5

    def test_beyond_last_breakpoint_fails(self):
        with pytest.raises(ExtrapolationError):
            interpolate_strict([(0.0, 0.0), (0.9, 0.2)], 0.95)

    def test_below_first_breakpoint_fails(self):
        with pytest.raises(ExtrapolationError):
            interpolate_strict([(0.1, 0.0), (1.0, 0.2)], 0.05)

    def test_nan_fails(self, curve):
        with pytest.raises(ExtrapolationError):
            interpolate_strict(curve, float("nan"))

    def test_degenerate(self):
        with pytest.raises(DegenerateCurveError):
            interpolate_strict([(1.0, 0.5)], 0.5)

    def test_decreasing_rate_fails(self):
        with pytest.raises(NonMonotonicCurveError):
            interpolate_strict([(0.0, 0.2), (1.0, 0.1)], 0.5)

    def test_repeated_utilization_fails(self):
        with pytest.raises(NonMonotonicCurveError):
            interpolate_strict([(0.0, 0.0), (0.5, 0.1), (0.5, 0.2), (1.0, 0.3)], 0.7)

    def test_flat_segment_allowed(self):
        assert interpolate_strict([(0.0, 0.1), (0.5, 0.1), (1.0, 0.3)], 0.25) == 0.1

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            interpolate_strict([], 0.5)
        assert issubclass(CurveError, ValueError)


class TestCheckMonotonic:
    """Tests for check_monotonic."""

    def test_valid(self):
        check_monotonic([(0.0, 0.0), (0.5, 0.1), (1.0, 1.0)])

    def test_invalid_reports_segment(self):
        with pytest.raises(NonMonotonicCurveError) as exc_info:
            check_monotonic([(0.0, 0.0), (0.6, 0.1), (0.5, 0.2)])
        assert exc_info.value.segment == ((0.6, 0.1), (0.5, 0.2))
