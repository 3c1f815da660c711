"""Marginfi client."""

from lendcurves.data.clients.marginfi.client import MarginfiClient
from lendcurves.data.clients.marginfi.parser import MarginfiParser

__all__ = [
    "MarginfiClient",
    "MarginfiParser",
]
