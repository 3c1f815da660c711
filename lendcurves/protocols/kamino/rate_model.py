"""Kamino reserve interest rate model.

Kamino reserves describe the borrow rate as a list of up to eleven
(utilization bps, borrow rate bps) breakpoints. Unused trailing slots are
padded with copies of the 100% point, so the curve is cut at the first
breakpoint sitting at exactly 100% utilization.

Reference: https://docs.kamino.finance/products/borrow/interest-rates
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from lendcurves.core.constants import ONE_HUNDRED_PCT_IN_BPS
from lendcurves.core.exceptions import InvalidBreakpointError
from lendcurves.core.models import CurvePoint, RateApys
from lendcurves.curves.base import RateModel
from lendcurves.curves.compounding import apr_to_apy
from lendcurves.curves.interpolation import clamp, interpolate_strict
from lendcurves.protocols.kamino.config import SLOTS_PER_YEAR


@dataclass(frozen=True)
class BorrowRatePoint:
    """One raw breakpoint of a Kamino borrow rate curve."""

    utilization_rate_bps: int
    borrow_rate_bps: int


@dataclass(frozen=True)
class KaminoRateParams:
    """Inputs of the Kamino rate model."""

    borrow_rate_curve_points: Sequence[BorrowRatePoint]
    protocol_take_rate_pct: float  # 0..100
    slot_adjustment_factor: float = 1.0
    fixed_host_interest_rate: float = 0.0  # fraction


@dataclass(frozen=True)
class KaminoReserveParams:
    """Reserve snapshot needed to build a rate row."""

    rates: KaminoRateParams
    total_supply: float  # token units
    borrowed_amount: float  # token units
    utilization: float  # fraction
    loan_to_value: float  # fraction
    borrow_factor_pct: float  # 100 = 1.0x
    last_update_slot: Optional[int] = None

    @property
    def liquidity(self) -> float:
        return self.total_supply - self.borrowed_amount

    @property
    def liability_weight(self) -> float:
        return self.borrow_factor_pct / 100.0


def truncate_borrow_curve(points: Sequence[BorrowRatePoint]) -> List[CurvePoint]:
    """
    Convert bps breakpoints to a fractional curve, stopping at 100% utilization.

    Raises:
        InvalidBreakpointError: utilization outside [0, 10000] bps or a negative rate
    """
    curve: List[CurvePoint] = []
    for point in points:
        util_bps = point.utilization_rate_bps
        rate_bps = point.borrow_rate_bps
        if not 0 <= util_bps <= ONE_HUNDRED_PCT_IN_BPS:
            raise InvalidBreakpointError(f"Utilization out of range: {util_bps} bps")
        if rate_bps < 0:
            raise InvalidBreakpointError(f"Negative borrow rate: {rate_bps} bps")

        curve.append(
            CurvePoint(util_bps / ONE_HUNDRED_PCT_IN_BPS, rate_bps / ONE_HUNDRED_PCT_IN_BPS)
        )
        if util_bps == ONE_HUNDRED_PCT_IN_BPS:
            break
    return curve


def estimated_borrow_rate(params: KaminoRateParams, utilization: float) -> float:
    """Borrow rate read off the reserve curve, before fees and slot adjustment."""
    curve = truncate_borrow_curve(params.borrow_rate_curve_points)
    return interpolate_strict(curve, utilization)


def compute_apys(params: KaminoRateParams, utilization: float) -> RateApys:
    """
    Lending and borrowing APY at a utilization.

    borrow_apr = (curve_rate + fixed_host_rate) * slot_adjustment
    supply_apr = utilization * curve_rate * slot_adjustment * (1 - take_rate)

    Both are compounded once per slot.

    Args:
        params: Reserve rate parameters
        utilization: Utilization fraction in [0, 1]

    Returns:
        RateApys with fractional APYs

    Raises:
        CurveError: the reserve curve is degenerate, non-monotonic or malformed
    """
    rate = estimated_borrow_rate(params, utilization)
    borrow_apr = (rate + params.fixed_host_interest_rate) * params.slot_adjustment_factor

    take_rate = 1 - params.protocol_take_rate_pct / 100
    supply_apr = utilization * rate * params.slot_adjustment_factor * take_rate

    return RateApys(
        lending_apy=apr_to_apy(supply_apr, SLOTS_PER_YEAR),
        borrow_apy=apr_to_apy(borrow_apr, SLOTS_PER_YEAR),
    )


def estimate_utilization(reserve: KaminoReserveParams, current_slot: Optional[int]) -> float:
    """
    Utilization after accruing interest for the slots since the last refresh.

    Reserves are only refreshed when touched, so the stored debt lags behind.
    The debt grows at the per-slot borrow rate; lenders receive the accrued
    interest net of the protocol take rate.
    """
    utilization = reserve.utilization
    if current_slot is None or reserve.last_update_slot is None:
        return utilization

    elapsed = current_slot - reserve.last_update_slot
    if elapsed <= 0 or reserve.total_supply <= 0 or reserve.borrowed_amount <= 0:
        return utilization

    params = reserve.rates
    rate = estimated_borrow_rate(params, clamp(utilization, 0.0, 1.0))
    borrow_apr = (rate + params.fixed_host_interest_rate) * params.slot_adjustment_factor
    growth = math.exp(elapsed * math.log1p(borrow_apr / SLOTS_PER_YEAR))

    new_debt = reserve.borrowed_amount * growth
    accrued = new_debt - reserve.borrowed_amount
    new_supply = reserve.total_supply + accrued * (1 - params.protocol_take_rate_pct / 100)
    return clamp(new_debt / new_supply, 0.0, 1.0)


class KaminoRateModel(RateModel):
    """Segmented-breakpoint rate model of a Kamino reserve."""

    def __init__(self, params: KaminoRateParams):
        self.params = params

    def borrow_curve(self) -> List[CurvePoint]:
        return truncate_borrow_curve(self.params.borrow_rate_curve_points)

    def apys_at(self, utilization: float) -> RateApys:
        return compute_apys(self.params, utilization)
