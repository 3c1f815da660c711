"""Marginfi client implementing ProtocolClient interface."""

import logging
from typing import Any, Dict

from lendcurves.core.models import ProtocolDataRow, inverse
from lendcurves.data.clients.base import ProtocolClient, ProtocolType
from lendcurves.data.clients.marginfi.parser import MarginfiParser
from lendcurves.data.context import AggregationContext
from lendcurves.data.sources.base import MarketSource
from lendcurves.data.tokens import TokenData
from lendcurves.protocols.marginfi.config import PROTOCOL_NAME
from lendcurves.protocols.marginfi.rate_model import MarginfiRateModel

logger = logging.getLogger(__name__)


class MarginfiClient(ProtocolClient):
    """Builds rate rows from Marginfi banks."""

    def __init__(self, source: MarketSource):
        super().__init__(source)
        self._parser = MarginfiParser()

    @property
    def protocol_type(self) -> ProtocolType:
        return ProtocolType.MARGINFI

    @property
    def protocol_name(self) -> str:
        return PROTOCOL_NAME

    def reserve_address(self, registry_key: str, token: TokenData) -> str:
        # Registry keys are bank addresses
        return registry_key

    def build_row(
        self,
        raw: Dict[str, Any],
        token: TokenData,
        context: AggregationContext,
    ) -> ProtocolDataRow:
        bank = self._parser.parse_bank(raw)
        symbol = token.token_symbol
        params = bank.rates
        model = MarginfiRateModel(params)

        context.record_optimal_utilization(symbol, params.optimal_utilization_rate)

        utilization = bank.utilization
        current = model.apys_at(utilization)
        logger.debug(f"Marginfi {symbol}: utilization={utilization:.4f}")

        return ProtocolDataRow(
            protocol=self.protocol_name,
            token=symbol,
            liquidity=bank.liquidity,
            current_utilization=utilization,
            optimal_utilization=params.optimal_utilization_rate,
            plateau_rate=params.plateau_interest_rate,
            max_rate=params.max_interest_rate,
            lending_rate=current.lending_apy,
            borrowing_rate=current.borrow_apy,
            collateral_weight=bank.asset_weight_init,
            liability_weight=bank.liability_weight_init,
            ltv=inverse(bank.liability_weight_init),
            curves=self.sample_curves(model, context.grid, symbol),
        )
