"""Kamino Lend client implementing ProtocolClient interface."""

import logging
from typing import Any, Dict, Optional

from lendcurves.core.models import ProtocolDataRow, inverse
from lendcurves.data.clients.base import ProtocolClient, ProtocolType
from lendcurves.data.clients.kamino.parser import KaminoParser
from lendcurves.data.context import AggregationContext
from lendcurves.data.sources.base import MarketSource
from lendcurves.data.sources.solana_rpc import SolanaRpcClient
from lendcurves.data.tokens import TokenData
from lendcurves.protocols.kamino.config import PROTOCOL_NAME
from lendcurves.protocols.kamino.rate_model import KaminoRateModel, estimate_utilization

logger = logging.getLogger(__name__)


class KaminoClient(ProtocolClient):
    """Builds rate rows from Kamino reserves."""

    def __init__(
        self,
        source: MarketSource,
        slot_source: Optional[SolanaRpcClient] = None,
    ):
        super().__init__(source)
        self.slot_source = slot_source
        self._parser = KaminoParser()

    @property
    def protocol_type(self) -> ProtocolType:
        return ProtocolType.KAMINO

    @property
    def protocol_name(self) -> str:
        return PROTOCOL_NAME

    async def load_market(self, context: AggregationContext) -> None:
        """Load reserves, then the current slot for point-in-time APYs."""
        await super().load_market(context)
        if self.slot_source is None:
            return
        try:
            context.current_slot = await self.slot_source.get_slot()
        except Exception as e:
            logger.warning(f"Failed to fetch current slot, using reported utilization: {e}")

    def reserve_address(self, registry_key: str, token: TokenData) -> str:
        # Kamino reserves are keyed by mint
        return token.token_address

    def build_row(
        self,
        raw: Dict[str, Any],
        token: TokenData,
        context: AggregationContext,
    ) -> ProtocolDataRow:
        reserve = self._parser.parse_reserve(raw)
        symbol = token.token_symbol
        model = KaminoRateModel(reserve.rates)

        context.log_borrow_curve(symbol, model.borrow_curve())

        # Evaluate at Marginfi's optimal utilization for a like-for-like plateau
        optimal = context.optimal_utilization_for(symbol)
        plateau = model.apys_at(optimal)
        at_max = model.apys_at(1.0)
        current = model.apys_at(estimate_utilization(reserve, context.current_slot))

        liability_weight = reserve.liability_weight
        return ProtocolDataRow(
            protocol=self.protocol_name,
            token=symbol,
            liquidity=reserve.liquidity,
            current_utilization=reserve.utilization,
            optimal_utilization=optimal,
            plateau_rate=plateau.borrow_apy,
            max_rate=at_max.borrow_apy,
            lending_rate=current.lending_apy,
            borrowing_rate=current.borrow_apy,
            collateral_weight=reserve.loan_to_value,
            liability_weight=liability_weight,
            ltv=inverse(liability_weight),
            curves=self.sample_curves(model, context.grid, symbol),
        )

    async def close(self) -> None:
        await super().close()
        if self.slot_source is not None:
            await self.slot_source.close()
