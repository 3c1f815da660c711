"""Marginfi rate model."""

from lendcurves.protocols.marginfi.config import PROTOCOL_NAME
from lendcurves.protocols.marginfi.rate_model import (
    InterestRates,
    MarginfiRateParams,
    MarginfiBankParams,
    MarginfiRateModel,
    borrow_apr_at,
    compute_curve_vectors,
    compute_interest_rates,
)

__all__ = [
    "PROTOCOL_NAME",
    "InterestRates",
    "MarginfiRateParams",
    "MarginfiBankParams",
    "MarginfiRateModel",
    "borrow_apr_at",
    "compute_curve_vectors",
    "compute_interest_rates",
]
