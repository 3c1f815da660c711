"""Core data models."""

from .curve import CurvePoint, CurveVectors, RateApys
from .rates import ProtocolDataRow, to_float, inverse

__all__ = [
    "CurvePoint",
    "CurveVectors",
    "RateApys",
    "ProtocolDataRow",
    "to_float",
    "inverse",
]
