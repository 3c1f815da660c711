"""Kamino Lend rate model."""

from lendcurves.protocols.kamino.config import PROTOCOL_NAME, SLOTS_PER_YEAR
from lendcurves.protocols.kamino.rate_model import (
    BorrowRatePoint,
    KaminoRateParams,
    KaminoReserveParams,
    KaminoRateModel,
    truncate_borrow_curve,
    compute_apys,
    estimate_utilization,
)

__all__ = [
    "PROTOCOL_NAME",
    "SLOTS_PER_YEAR",
    "BorrowRatePoint",
    "KaminoRateParams",
    "KaminoReserveParams",
    "KaminoRateModel",
    "truncate_borrow_curve",
    "compute_apys",
    "estimate_utilization",
]
