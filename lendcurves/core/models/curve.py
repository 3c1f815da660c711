"""Curve data models."""

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple


class CurvePoint(NamedTuple):
    """A knot on a piecewise rate curve."""

    utilization: float
    rate: float


class RateApys(NamedTuple):
    """Lending and borrowing APY at one utilization (fractions, 0.072 = 7.2%)."""

    lending_apy: float
    borrow_apy: float


@dataclass
class CurveVectors:
    """Aligned utilization / rate vectors for charting.

    knots are utilization percent points in [0, 100]; borrow_rates and
    lending_rates are APYs in percent units (7.2 = 7.2%).
    """

    knots: List[float] = field(default_factory=list)
    borrow_rates: List[float] = field(default_factory=list)
    lending_rates: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.knots)

    def to_dict(self) -> Dict[str, List[float]]:
        return {
            "knots": list(self.knots),
            "borrowRates": list(self.borrow_rates),
            "lendingRates": list(self.lending_rates),
        }
