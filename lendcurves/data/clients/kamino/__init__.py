"""Kamino Lend client."""

from lendcurves.data.clients.kamino.client import KaminoClient
from lendcurves.data.clients.kamino.parser import KaminoParser

__all__ = [
    "KaminoClient",
    "KaminoParser",
]
