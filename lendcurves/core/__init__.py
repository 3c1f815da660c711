"""Core module - models, constants and exceptions."""

from .models import CurvePoint, CurveVectors, ProtocolDataRow, RateApys
from .exceptions import (
    LendCurvesError,
    CurveError,
    DegenerateCurveError,
    NonMonotonicCurveError,
    ExtrapolationError,
    InvalidBreakpointError,
    RpcError,
)

__all__ = [
    "CurvePoint",
    "CurveVectors",
    "ProtocolDataRow",
    "RateApys",
    "LendCurvesError",
    "CurveError",
    "DegenerateCurveError",
    "NonMonotonicCurveError",
    "ExtrapolationError",
    "InvalidBreakpointError",
    "RpcError",
]
