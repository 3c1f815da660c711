"""Unit tests for the Marginfi rate model."""

import pytest

from lendcurves.core.constants import HOURS_PER_YEAR, MINUTES_PER_YEAR
from lendcurves.curves.compounding import apr_to_apy
from lendcurves.protocols.marginfi import (
    MarginfiBankParams,
    MarginfiRateModel,
    MarginfiRateParams,
    borrow_apr_at,
    compute_curve_vectors,
    compute_interest_rates,
)


@pytest.fixture
def params():
    return MarginfiRateParams(
        optimal_utilization_rate=0.8,
        plateau_interest_rate=0.1,
        max_interest_rate=1.0,
        protocol_ir_fee=0.1,
        protocol_fixed_fee_apr=0.01,
    )


class TestBorrowAprAt:
    """Tests for borrow_apr_at (percent units)."""

    def test_left_segment(self):
        assert borrow_apr_at(40, 80, 10, 100) == pytest.approx(5.0)

    def test_at_optimal(self):
        assert borrow_apr_at(80, 80, 10, 100) == 10.0

    def test_right_segment(self):
        assert borrow_apr_at(90, 80, 10, 100) == pytest.approx(55.0)

    def test_full_utilization(self):
        assert borrow_apr_at(100, 80, 10, 100) == pytest.approx(100.0)

    def test_zero_utilization(self):
        assert borrow_apr_at(0, 80, 10, 100) == 0.0

    def test_zero_optimal(self):
        assert borrow_apr_at(0, 0, 10, 100) == 10.0
        assert borrow_apr_at(-1, 0, 10, 100) == 0.0

    def test_optimal_clamped_to_100(self):
        assert borrow_apr_at(50, 150, 10, 100) == pytest.approx(5.0)
        assert borrow_apr_at(100, 100, 10, 100) == 10.0


class TestComputeCurveVectors:
    """Tests for compute_curve_vectors."""

    def test_values(self):
        vectors = compute_curve_vectors(80, 10, 100, [0.0, 40.0, 80.0, 100.0], 0.0)
        assert vectors.borrow_rates[0] == 0.0
        assert vectors.lending_rates[0] == 0.0
        assert vectors.borrow_rates[1] == pytest.approx(apr_to_apy(0.05, MINUTES_PER_YEAR) * 100)
        assert vectors.lending_rates[1] == pytest.approx(apr_to_apy(0.02, MINUTES_PER_YEAR) * 100)
        assert vectors.borrow_rates[3] == pytest.approx(apr_to_apy(1.0, MINUTES_PER_YEAR) * 100)
        assert vectors.lending_rates[3] == pytest.approx(vectors.borrow_rates[3])

    def test_equal_lengths(self):
        knots = [float(k) for k in range(0, 101, 5)]
        vectors = compute_curve_vectors(80, 10, 100, knots, 0.1)
        assert len(vectors.knots) == len(vectors.borrow_rates) == len(vectors.lending_rates) == 21

    def test_fee_raises_borrow_only(self):
        knots = [0.0, 25.0, 50.0, 80.0, 90.0, 100.0]
        base = compute_curve_vectors(80, 10, 100, knots, 0.0)
        with_fee = compute_curve_vectors(80, 10, 100, knots, 0.2)
        for b0, b1 in zip(base.borrow_rates, with_fee.borrow_rates):
            assert b1 >= b0
        assert with_fee.lending_rates == base.lending_rates

    def test_monotonic_in_utilization(self):
        knots = [float(k) for k in range(101)]
        vectors = compute_curve_vectors(80, 10, 100, knots, 0.1)
        assert all(b >= a for a, b in zip(vectors.borrow_rates, vectors.borrow_rates[1:]))


class TestComputeInterestRates:
    """Tests for compute_interest_rates."""

    def test_fees(self, params):
        rates = compute_interest_rates(params, 0.4)
        assert rates.lending_apr == pytest.approx(0.02)
        assert rates.borrowing_apr == pytest.approx(0.05 * 1.1 + 0.01)

    def test_zero_utilization_pays_fixed_fee(self, params):
        rates = compute_interest_rates(params, 0.0)
        assert rates.lending_apr == 0.0
        assert rates.borrowing_apr == pytest.approx(0.01)

    def test_fee_properties(self, params):
        assert params.borrow_fee_fraction == pytest.approx(0.1)
        assert params.fixed_fee_apr == pytest.approx(0.01)


class TestMarginfiBankParams:
    """Tests for MarginfiBankParams."""

    def test_utilization_and_liquidity(self, params):
        bank = MarginfiBankParams(params, 200.0, 50.0, 0.8, 1.25)
        assert bank.utilization == 0.25
        assert bank.liquidity == 150.0

    def test_empty_bank(self, params):
        bank = MarginfiBankParams(params, 0.0, 0.0, 0.8, 1.25)
        assert bank.utilization == 0.0


class TestMarginfiRateModel:
    """Tests for MarginfiRateModel."""

    def test_apys_compound_hourly(self, params):
        apys = MarginfiRateModel(params).apys_at(0.4)
        assert apys.lending_apy == pytest.approx(apr_to_apy(0.02, HOURS_PER_YEAR))
        assert apys.borrow_apy == pytest.approx(apr_to_apy(0.065, HOURS_PER_YEAR))

    def test_curve_vectors_use_percent_inputs(self, params):
        vectors = MarginfiRateModel(params).curve_vectors([80.0])
        expected = apr_to_apy(0.1 * 1.1, MINUTES_PER_YEAR) * 100
        assert vectors.borrow_rates[0] == pytest.approx(expected)
