"""Kamino reserve payload parser.

Field names follow the klend SDK's Reserve state (camelCase). Amounts are
raw integers scaled by the mint factor.
"""

import math
from typing import Any, Dict, List

from lendcurves.core.constants import ONE_HUNDRED_PCT_IN_BPS
from lendcurves.core.models import to_float
from lendcurves.protocols.kamino.config import SLOT_DURATION_MS
from lendcurves.protocols.kamino.rate_model import (
    BorrowRatePoint,
    KaminoRateParams,
    KaminoReserveParams,
)


class KaminoParser:
    """Parser for Kamino reserve payloads."""

    @staticmethod
    def parse_float(value: Any, default: float = float("nan")) -> float:
        """Parse a value to float, `default` when missing."""
        if value is None:
            return default
        return to_float(value)

    @classmethod
    def parse_mint_factor(cls, raw: Dict[str, Any]) -> float:
        """10**decimals of the reserve's mint."""
        if raw.get("mintFactor") is not None:
            factor = cls.parse_float(raw.get("mintFactor"))
        else:
            factor = 10.0 ** cls.parse_float(raw.get("mintDecimals"), 0.0)
        if not math.isfinite(factor) or factor == 0:
            raise ValueError("Invalid mint factor")
        return factor

    @staticmethod
    def parse_curve_points(raw: Dict[str, Any]) -> List[BorrowRatePoint]:
        """Borrow rate curve breakpoints (bps)."""
        curve = raw.get("borrowRateCurve") or {}
        points = curve.get("points") if isinstance(curve, dict) else curve
        return [
            BorrowRatePoint(
                utilization_rate_bps=int(point["utilizationRateBps"]),
                borrow_rate_bps=int(point["borrowRateBps"]),
            )
            for point in points or []
        ]

    @classmethod
    def parse_slot_adjustment_factor(cls, raw: Dict[str, Any]) -> float:
        """Ratio of the nominal to the recently observed slot duration."""
        if raw.get("slotAdjustmentFactor") is not None:
            return cls.parse_float(raw.get("slotAdjustmentFactor"))
        recent_ms = cls.parse_float(raw.get("recentSlotDurationMs"))
        if math.isfinite(recent_ms) and recent_ms > 0:
            return SLOT_DURATION_MS / recent_ms
        return 1.0

    @classmethod
    def parse_rate_params(cls, raw: Dict[str, Any]) -> KaminoRateParams:
        host_fixed_bps = cls.parse_float(raw.get("hostFixedInterestRateBps"), 0.0)
        return KaminoRateParams(
            borrow_rate_curve_points=tuple(cls.parse_curve_points(raw)),
            protocol_take_rate_pct=cls.parse_float(raw.get("protocolTakeRatePct")),
            slot_adjustment_factor=cls.parse_slot_adjustment_factor(raw),
            fixed_host_interest_rate=host_fixed_bps / ONE_HUNDRED_PCT_IN_BPS,
        )

    @classmethod
    def parse_reserve(cls, raw: Dict[str, Any]) -> KaminoReserveParams:
        """
        Parse a Kamino reserve payload.

        Args:
            raw: Reserve payload from the market source

        Returns:
            KaminoReserveParams with token-unit amounts and fractional weights

        Raises:
            ValueError: mint factor missing or zero
            KeyError: a curve breakpoint is missing a field
        """
        mint_factor = cls.parse_mint_factor(raw)
        total_supply = cls.parse_float(raw.get("totalSupply")) / mint_factor
        borrowed = cls.parse_float(raw.get("borrowedAmount")) / mint_factor

        if raw.get("utilization") is not None:
            utilization = cls.parse_float(raw.get("utilization"))
        elif total_supply > 0:
            utilization = borrowed / total_supply
        else:
            utilization = 0.0

        if raw.get("loanToValuePct") is not None:
            loan_to_value = cls.parse_float(raw.get("loanToValuePct")) / 100
        else:
            loan_to_value = cls.parse_float(raw.get("loanToValue"))

        last_update = raw.get("lastUpdate") or {}
        last_slot = raw.get("lastUpdateSlot", last_update.get("slot"))

        return KaminoReserveParams(
            rates=cls.parse_rate_params(raw),
            total_supply=total_supply,
            borrowed_amount=borrowed,
            utilization=utilization,
            loan_to_value=loan_to_value,
            borrow_factor_pct=cls.parse_float(raw.get("borrowFactorPct"), 100.0),
            last_update_slot=int(last_slot) if last_slot is not None else None,
        )
