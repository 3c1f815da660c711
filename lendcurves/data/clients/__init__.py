"""Protocol clients."""

from lendcurves.data.clients.base import ProtocolClient, ProtocolType

__all__ = ["ProtocolClient", "ProtocolType"]
