"""Rate curve primitives: grid, interpolation, compounding and vectors."""

from .base import RateModel
from .compounding import apr_to_apy
from .grid import build_grid
from .interpolation import (
    clamp,
    normalize_curve,
    interpolate,
    interpolate_strict,
    check_monotonic,
)
from .vectors import build_vectors, sanitize_vectors

__all__ = [
    "RateModel",
    "apr_to_apy",
    "build_grid",
    "clamp",
    "normalize_curve",
    "interpolate",
    "interpolate_strict",
    "check_monotonic",
    "build_vectors",
    "sanitize_vectors",
]
