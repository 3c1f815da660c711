"""Per-run aggregation state shared between protocol clients."""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from config.settings import Settings, get_settings
from lendcurves.core.constants import DEFAULT_CURVE_POINTS
from lendcurves.curves.grid import build_grid
from lendcurves.data.curve_log import CurveLog, transform_borrow_curve


@dataclass
class AggregationContext:
    """
    State scoped to a single aggregation run.

    Marginfi publishes the optimal utilization of each token; Kamino reads it
    to evaluate its own curve at the same point. Clients run concurrently,
    so readers fall back to the default when the value is not there yet.
    """

    grid: List[float] = field(default_factory=lambda: build_grid(DEFAULT_CURVE_POINTS))
    default_optimal_utilization: float = 0.8
    current_slot: Optional[int] = None
    optimal_utilization: Dict[str, float] = field(default_factory=dict)
    borrow_curve_log: CurveLog = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AggregationContext":
        settings = settings or get_settings()
        return cls(
            grid=build_grid(settings.curve_points),
            default_optimal_utilization=settings.default_optimal_utilization,
        )

    def record_optimal_utilization(self, token_symbol: str, value: float) -> None:
        """Publish a token's optimal utilization (last write wins)."""
        if math.isfinite(value):
            self.optimal_utilization[token_symbol] = value

    def optimal_utilization_for(self, token_symbol: str) -> float:
        return self.optimal_utilization.get(token_symbol, self.default_optimal_utilization)

    def log_borrow_curve(self, token_symbol: str, curve: Sequence[Tuple[float, float]]) -> None:
        self.borrow_curve_log[token_symbol] = transform_borrow_curve(curve)
