"""Base protocol client interface.

Defines the abstract interface that all protocol clients must implement,
so the aggregator can build rate rows from any lending protocol.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Sequence

from lendcurves.core.exceptions import CurveError
from lendcurves.core.models import CurveVectors, ProtocolDataRow
from lendcurves.curves.base import RateModel
from lendcurves.curves.vectors import build_vectors
from lendcurves.data.context import AggregationContext
from lendcurves.data.sources.base import MarketSource
from lendcurves.data.tokens import TokenData

logger = logging.getLogger(__name__)


class ProtocolType(Enum):
    """Supported lending protocols."""

    MARGINFI = "marginfi"
    KAMINO = "kamino"


class ProtocolClient(ABC):
    """Abstract base class for protocol-specific rate clients.

    A client turns the raw reserves of its market source into
    ProtocolDataRow snapshots using the protocol's rate model.
    """

    def __init__(self, source: MarketSource):
        self.source = source

    @property
    @abstractmethod
    def protocol_type(self) -> ProtocolType:
        """Return the protocol type for this client."""
        ...

    @property
    @abstractmethod
    def protocol_name(self) -> str:
        """Return a human-readable protocol name."""
        ...

    # ========== MARKET METHODS ==========

    async def load_market(self, context: AggregationContext) -> None:
        """Load the market snapshot once per aggregation run."""
        await self.source.load()

    @abstractmethod
    def reserve_address(self, registry_key: str, token: TokenData) -> str:
        """Address used to look up the token's reserve / bank.

        Args:
            registry_key: Key of the token in the registry
            token: Token metadata

        Returns:
            Address understood by the market source
        """
        ...

    @abstractmethod
    def build_row(
        self,
        raw: Dict[str, Any],
        token: TokenData,
        context: AggregationContext,
    ) -> ProtocolDataRow:
        """Compute the rate row from a raw reserve payload.

        Raises:
            CurveError: the reserve's rate curve is unusable
            ValueError: the payload is malformed
        """
        ...

    # ========== RATE METHODS ==========

    async def get_rate(
        self,
        registry_key: str,
        token: TokenData,
        context: AggregationContext,
    ) -> Optional[ProtocolDataRow]:
        """Rate row for one token, or None when the market has no reserve for it."""
        address = self.reserve_address(registry_key, token)
        raw = await self.source.get_reserve(address)
        if raw is None:
            logger.warning(
                f"{self.protocol_name} has no reserve for {token.token_symbol} ({address})"
            )
            return None
        return self.build_row(raw, token, context)

    def sample_curves(
        self,
        model: RateModel,
        grid: Sequence[float],
        token_symbol: str,
    ) -> Optional[CurveVectors]:
        """Curve vectors over the grid; None when the model cannot be sampled."""
        try:
            return build_vectors(model, grid)
        except (CurveError, ArithmeticError) as e:
            logger.warning(f"No {self.protocol_name} curve for {token_symbol}: {e}")
            return None

    # ========== LIFECYCLE ==========

    async def close(self) -> None:
        """Close any open connections and clean up resources."""
        await self.source.close()
