"""Raw data sources: market snapshots and Solana RPC."""

from lendcurves.data.sources.base import MarketSource
from lendcurves.data.sources.snapshot import SnapshotSource
from lendcurves.data.sources.solana_rpc import SolanaRpcClient

__all__ = [
    "MarketSource",
    "SnapshotSource",
    "SolanaRpcClient",
]
