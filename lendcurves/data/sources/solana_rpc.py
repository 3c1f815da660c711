"""Solana JSON-RPC client."""

import logging
from typing import Any, Dict, List, Optional

import aiohttp
from aiolimiter import AsyncLimiter

from config.settings import Settings, get_settings
from lendcurves.core.exceptions import RpcError

logger = logging.getLogger(__name__)


class SolanaRpcClient:
    """Minimal Solana JSON-RPC client with rate limiting."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._rate_limiter = AsyncLimiter(
            self.settings.rpc_rate_limit, self.settings.rpc_rate_window
        )
        self._request_id = 0

    async def _post_json(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON-RPC request with rate limiting."""
        timeout = aiohttp.ClientTimeout(total=self.settings.snapshot_timeout_seconds)
        async with self._rate_limiter:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.settings.rpc_url, json=payload) as response:
                    response.raise_for_status()
                    return await response.json()

    async def rpc_call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Make a JSON-RPC call.

        Raises:
            RpcError: the node returned an error object
        """
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params or [],
        }
        result = await self._post_json(payload)
        if "error" in result:
            raise RpcError(f"RPC error for {method}: {result['error']}")
        return result.get("result")

    async def get_slot(self) -> int:
        """Current slot at the configured commitment."""
        result = await self.rpc_call("getSlot", [{"commitment": self.settings.rpc_commitment}])
        slot = int(result)
        logger.debug(f"Current slot: {slot}")
        return slot

    async def close(self) -> None:
        """Close the client connection (no-op as we create fresh sessions)."""
        pass
