"""Base rate model interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from lendcurves.core.constants import PERCENT
from lendcurves.core.models import CurveVectors, RateApys


class RateModel(ABC):
    """Abstract base class for protocol interest rate models.

    Models report APYs as fractions at a utilization fraction; curve_vectors
    samples them over utilization percent knots and reports percent units.
    """

    @abstractmethod
    def apys_at(self, utilization: float) -> RateApys:
        """Lending and borrowing APY at a utilization in [0, 1]."""
        ...

    def curve_vectors(self, knots: Sequence[float]) -> CurveVectors:
        """Sample the model at each utilization percent knot."""
        borrow = []
        lend = []
        for u_pct in knots:
            apys = self.apys_at(u_pct / PERCENT)
            borrow.append(apys.borrow_apy * PERCENT)
            lend.append(apys.lending_apy * PERCENT)
        return CurveVectors(knots=list(knots), borrow_rates=borrow, lending_rates=lend)
