"""Market aggregator across lending protocols."""

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from config.settings import Settings, get_settings
from lendcurves.core.models import ProtocolDataRow
from lendcurves.data.clients.base import ProtocolClient
from lendcurves.data.clients.kamino import KaminoClient
from lendcurves.data.clients.marginfi import MarginfiClient
from lendcurves.data.context import AggregationContext
from lendcurves.data.curve_log import write_borrow_curve_log
from lendcurves.data.sources.snapshot import SnapshotSource
from lendcurves.data.sources.solana_rpc import SolanaRpcClient
from lendcurves.data.tokens import TokenData, get_token_data_map

logger = logging.getLogger(__name__)


class RateAggregator:
    """
    Collects rate rows for every (protocol, token) pair.

    Protocols and tokens are fetched concurrently. A failure only drops the
    affected market: a protocol whose market cannot be loaded contributes no
    rows, a token whose lookup or rate computation fails is skipped.
    """

    def __init__(
        self,
        clients: Sequence[ProtocolClient],
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the aggregator.

        Args:
            clients: Protocol clients, in output order
            settings: Application settings
        """
        self.clients = list(clients)
        self.settings = settings or get_settings()

    async def aggregate(
        self,
        tokens: Optional[Dict[str, TokenData]] = None,
        context: Optional[AggregationContext] = None,
    ) -> List[ProtocolDataRow]:
        """
        Fetch rate rows for all protocols and tokens.

        Args:
            tokens: Token registry (None = configured table)
            context: Per-run state (None = fresh context from settings)

        Returns:
            Rows ordered by protocol, then by registry order
        """
        if tokens is None:
            tokens = get_token_data_map(settings=self.settings)
        if context is None:
            context = AggregationContext.from_settings(self.settings)

        per_protocol = await asyncio.gather(
            *(self._protocol_rows(client, tokens, context) for client in self.clients)
        )
        rows = [row for protocol_rows in per_protocol for row in protocol_rows]
        logger.info(f"Aggregated {len(rows)} rows from {len(self.clients)} protocols")

        if self.settings.should_write_curve_log and context.borrow_curve_log:
            try:
                write_borrow_curve_log(
                    context.borrow_curve_log, self.settings.ensure_curve_log_dir()
                )
            except OSError as e:
                logger.warning(f"Failed to write borrow curve log: {e}")

        return rows

    async def _protocol_rows(
        self,
        client: ProtocolClient,
        tokens: Dict[str, TokenData],
        context: AggregationContext,
    ) -> List[ProtocolDataRow]:
        try:
            await client.load_market(context)
        except Exception as e:
            logger.error(f"Failed to load {client.protocol_name} market: {e}")
            return []

        results = await asyncio.gather(
            *(client.get_rate(key, token, context) for key, token in tokens.items()),
            return_exceptions=True,
        )

        rows: List[ProtocolDataRow] = []
        for token, result in zip(tokens.values(), results):
            if isinstance(result, Exception):
                logger.warning(
                    f"Skipping {client.protocol_name} {token.token_symbol}: {result}"
                )
                continue
            if result is not None:
                rows.append(result)
        return rows

    async def close(self) -> None:
        """Close all protocol clients."""
        for client in self.clients:
            await client.close()


def _kamino_snapshot_url(settings: Settings) -> Optional[str]:
    url = settings.kamino_snapshot_url
    if url and "{market}" in url:
        return url.format(market=settings.kamino_market_address)
    return url


def create_aggregator(settings: Optional[Settings] = None) -> RateAggregator:
    """
    Build an aggregator from the configured snapshot endpoints.

    Marginfi comes first so its optimal utilizations are usually published
    before Kamino reads them. Protocols without an endpoint are left out.
    """
    settings = settings or get_settings()
    clients: List[ProtocolClient] = []

    if settings.marginfi_snapshot_url:
        clients.append(MarginfiClient(SnapshotSource(settings.marginfi_snapshot_url, settings)))
    else:
        logger.warning("MARGINFI_SNAPSHOT_URL not set, skipping Marginfi")

    kamino_url = _kamino_snapshot_url(settings)
    if kamino_url:
        clients.append(
            KaminoClient(
                SnapshotSource(kamino_url, settings),
                slot_source=SolanaRpcClient(settings),
            )
        )
    else:
        logger.warning("KAMINO_SNAPSHOT_URL not set, skipping Kamino")

    return RateAggregator(clients, settings)
