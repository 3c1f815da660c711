"""Comparison view helpers."""

from lendcurves.comparison.selection import (
    FALLBACK_PRIORITY,
    REFERENCE_PROTOCOL,
    MarketOption,
    Selections,
    build_market_options,
    compute_coupled_selections,
    default_selections,
    make_key,
    pick_default_first_key,
    reconcile_selections,
)

__all__ = [
    "FALLBACK_PRIORITY",
    "REFERENCE_PROTOCOL",
    "MarketOption",
    "Selections",
    "build_market_options",
    "compute_coupled_selections",
    "default_selections",
    "make_key",
    "pick_default_first_key",
    "reconcile_selections",
]
