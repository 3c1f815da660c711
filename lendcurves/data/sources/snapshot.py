"""HTTP snapshot source.

Reads a JSON document exported by an SDK bridge:

    {"reserves": {"<address>": {...raw reserve fields...}, ...}}

A bare address -> payload mapping is accepted as well.
"""

import logging
from typing import Any, Dict, Optional

import aiohttp
from aiolimiter import AsyncLimiter

from config.settings import Settings, get_settings
from lendcurves.data.sources.base import MarketSource

logger = logging.getLogger(__name__)


class SnapshotSource(MarketSource):
    """Market source backed by an HTTP JSON snapshot."""

    def __init__(self, url: str, settings: Optional[Settings] = None):
        self.url = url
        self.settings = settings or get_settings()
        self._rate_limiter = AsyncLimiter(
            self.settings.rpc_rate_limit, self.settings.rpc_rate_window
        )
        self._reserves: Dict[str, Dict[str, Any]] = {}

    async def _fetch_json(self) -> Any:
        """GET the snapshot document with rate limiting."""
        timeout = aiohttp.ClientTimeout(total=self.settings.snapshot_timeout_seconds)
        async with self._rate_limiter:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url) as response:
                    response.raise_for_status()
                    return await response.json()

    @staticmethod
    def parse_snapshot(payload: Any) -> Dict[str, Dict[str, Any]]:
        """Extract the address -> reserve mapping from a snapshot document."""
        if not isinstance(payload, dict):
            raise ValueError(f"Malformed snapshot: expected an object, got {type(payload).__name__}")
        reserves = payload.get("reserves", payload)
        if not isinstance(reserves, dict):
            raise ValueError("Malformed snapshot: 'reserves' is not an object")
        return {
            str(address): reserve
            for address, reserve in reserves.items()
            if isinstance(reserve, dict)
        }

    async def load(self) -> None:
        payload = await self._fetch_json()
        self._reserves = self.parse_snapshot(payload)
        logger.info(f"Loaded {len(self._reserves)} reserves from {self.url}")

    async def get_reserve(self, address: str) -> Optional[Dict[str, Any]]:
        return self._reserves.get(address)
