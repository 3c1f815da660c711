"""Per-market rate snapshot model."""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .curve import CurveVectors

NAN = float("nan")


def to_float(value: Any) -> float:
    """Coerce a collaborator-supplied value to float, NaN when missing or invalid."""
    if value is None or isinstance(value, bool):
        return NAN
    try:
        return float(value)
    except (TypeError, ValueError):
        return NAN


def inverse(value: float) -> float:
    """1/value, NaN for zero or non-finite input."""
    if not math.isfinite(value) or value == 0:
        return NAN
    return 1.0 / value


@dataclass(frozen=True)
class ProtocolDataRow:
    """Snapshot of one (protocol, token) market.

    All numeric fields are fractions (0.072 = 7.2%) except liquidity, which is
    in native token units. Missing values are stored as NaN so downstream
    formatting deals with a single failure representation.
    """

    protocol: str
    token: str
    liquidity: float
    current_utilization: float
    optimal_utilization: float
    plateau_rate: float
    max_rate: float
    lending_rate: float
    borrowing_rate: float
    collateral_weight: float
    liability_weight: float
    ltv: float
    curves: Optional[CurveVectors] = None

    def __post_init__(self):
        for f in fields(self):
            if f.name in ("protocol", "token", "curves"):
                continue
            object.__setattr__(self, f.name, to_float(getattr(self, f.name)))

    @property
    def key(self) -> str:
        """Market key used by the comparison view."""
        return f"{self.protocol}_{self.token}"

    @property
    def has_curves(self) -> bool:
        return self.curves is not None and len(self.curves) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase shape handed to API / view layers."""
        data: Dict[str, Any] = {
            "protocol": self.protocol,
            "token": self.token,
            "liquidity": self.liquidity,
            "currentUtilization": self.current_utilization,
            "optimalUtilization": self.optimal_utilization,
            "plateauRate": self.plateau_rate,
            "maxRate": self.max_rate,
            "lendingRate": self.lending_rate,
            "borrowingRate": self.borrowing_rate,
            "collateralWeight": self.collateral_weight,
            "liabilityWeight": self.liability_weight,
            "ltv": self.ltv,
        }
        if self.curves is not None:
            data["curves"] = self.curves.to_dict()
        return data
