"""Market source interface.

A market source hands out the raw reserve / bank payloads of one lending
market. Deserializing on-chain accounts is the job of the protocol SDKs;
sources only expose their output as plain dicts.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class MarketSource(ABC):
    """Abstract base class for raw market state providers."""

    @abstractmethod
    async def load(self) -> None:
        """Load (or refresh) the market snapshot."""
        ...

    @abstractmethod
    async def get_reserve(self, address: str) -> Optional[Dict[str, Any]]:
        """Raw reserve / bank payload for an address, or None if the market has none."""
        ...

    async def close(self) -> None:
        """Close any open connections and clean up resources."""
        return None
