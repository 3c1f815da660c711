"""Marginfi bank interest rate model.

Marginfi banks use a two-segment linear curve: the rate rises from 0 to the
plateau rate at the optimal utilization, then linearly to the max rate at
100% utilization. Borrowers additionally pay the insurance and protocol
fees as a markup on the curve rate plus fixed APR fees.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Sequence

from lendcurves.core.constants import CURVE_EPSILON, PERCENT
from lendcurves.core.models import CurveVectors, RateApys
from lendcurves.curves.base import RateModel
from lendcurves.curves.compounding import apr_to_apy
from lendcurves.curves.interpolation import clamp
from lendcurves.protocols.marginfi.config import (
    BANK_COMPOUNDING_PERIODS,
    CURVE_COMPOUNDING_PERIODS,
)


class InterestRates(NamedTuple):
    """Point-in-time APRs of a bank (fractions)."""

    lending_apr: float
    borrowing_apr: float


@dataclass(frozen=True)
class MarginfiRateParams:
    """Inputs of the Marginfi rate model. Rates and fees are fractions."""

    optimal_utilization_rate: float
    plateau_interest_rate: float
    max_interest_rate: float
    insurance_ir_fee: float = 0.0
    protocol_ir_fee: float = 0.0
    insurance_fee_fixed_apr: float = 0.0
    protocol_fixed_fee_apr: float = 0.0

    @property
    def borrow_fee_fraction(self) -> float:
        """Markup applied to the curve rate for borrowers."""
        return self.insurance_ir_fee + self.protocol_ir_fee

    @property
    def fixed_fee_apr(self) -> float:
        return self.insurance_fee_fixed_apr + self.protocol_fixed_fee_apr


@dataclass(frozen=True)
class MarginfiBankParams:
    """Bank snapshot needed to build a rate row."""

    rates: MarginfiRateParams
    total_assets: float  # token units
    total_liabilities: float  # token units
    asset_weight_init: float
    liability_weight_init: float

    @property
    def liquidity(self) -> float:
        return self.total_assets - self.total_liabilities

    @property
    def utilization(self) -> float:
        if self.total_assets <= 0:
            return 0.0
        return self.total_liabilities / self.total_assets


def borrow_apr_at(
    utilization_pct: float,
    optimal_utilization_pct: float,
    plateau_rate: float,
    max_rate: float,
) -> float:
    """
    Curve APR at a utilization, before fees.

    Below optimal: (u / optimal) * plateau
    At or above:   plateau + (u - optimal) / (100 - optimal) * (max - plateau)

    An optimal utilization of 0 leaves nothing left of the plateau, so the
    left segment is 0. The optimal utilization is clamped into [0, 100].
    """
    opt = clamp(optimal_utilization_pct, 0.0, PERCENT)
    if utilization_pct < opt:
        if opt > 0:
            return (utilization_pct / opt) * plateau_rate
        return 0.0

    denom = max(CURVE_EPSILON, PERCENT - opt)
    return plateau_rate + ((utilization_pct - opt) / denom) * (max_rate - plateau_rate)


def compute_curve_vectors(
    optimal_utilization_pct: float,
    plateau_rate_pct: float,
    max_rate_pct: float,
    knots: Sequence[float],
    borrow_fee_fraction: float,
) -> CurveVectors:
    """
    Borrow / lend APY curves over utilization knots, all in percent units.

    lend_apr = borrow_apr * u / 100  (before the fee markup)
    borrow_apr *= 1 + borrow_fee_fraction

    APYs compound every minute (525,600 periods per year).

    Args:
        optimal_utilization_pct: Optimal utilization in [0, 100]
        plateau_rate_pct: APR at optimal utilization, percent units
        max_rate_pct: APR at 100% utilization, percent units
        knots: Utilization percent points
        borrow_fee_fraction: Fee markup on the borrow APR (0.1 = +10%)

    Returns:
        CurveVectors with percent-unit APYs
    """
    borrow_rates: List[float] = []
    lending_rates: List[float] = []

    for u_pct in knots:
        borrow_apr = borrow_apr_at(u_pct, optimal_utilization_pct, plateau_rate_pct, max_rate_pct)
        lend_apr = borrow_apr * (u_pct / PERCENT)
        borrow_apr *= 1 + borrow_fee_fraction

        borrow_apy = apr_to_apy(borrow_apr / PERCENT, CURVE_COMPOUNDING_PERIODS)
        lend_apy = apr_to_apy(lend_apr / PERCENT, CURVE_COMPOUNDING_PERIODS)
        borrow_rates.append(borrow_apy * PERCENT)
        lending_rates.append(lend_apy * PERCENT)

    return CurveVectors(knots=list(knots), borrow_rates=borrow_rates, lending_rates=lending_rates)


def compute_interest_rates(params: MarginfiRateParams, utilization: float) -> InterestRates:
    """
    Bank APRs at a utilization fraction.

    lending   = curve_rate * utilization
    borrowing = curve_rate * (1 + ir_fees) + fixed_fees
    """
    curve_rate = borrow_apr_at(
        utilization * PERCENT,
        params.optimal_utilization_rate * PERCENT,
        params.plateau_interest_rate,
        params.max_interest_rate,
    )
    return InterestRates(
        lending_apr=curve_rate * utilization,
        borrowing_apr=curve_rate * (1 + params.borrow_fee_fraction) + params.fixed_fee_apr,
    )


class MarginfiRateModel(RateModel):
    """Plateau / max rate model of a Marginfi bank."""

    def __init__(self, params: MarginfiRateParams):
        self.params = params

    def apys_at(self, utilization: float) -> RateApys:
        rates = compute_interest_rates(self.params, utilization)
        return RateApys(
            lending_apy=apr_to_apy(rates.lending_apr, BANK_COMPOUNDING_PERIODS),
            borrow_apy=apr_to_apy(rates.borrowing_apr, BANK_COMPOUNDING_PERIODS),
        )

    def curve_vectors(self, knots: Sequence[float]) -> CurveVectors:
        return compute_curve_vectors(
            self.params.optimal_utilization_rate * PERCENT,
            self.params.plateau_interest_rate * PERCENT,
            self.params.max_interest_rate * PERCENT,
            knots,
            self.params.borrow_fee_fraction,
        )
