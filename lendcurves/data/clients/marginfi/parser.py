"""Marginfi bank payload parser.

Field names follow the marginfi-client-v2 Bank (camelCase). Quantities are
either given directly or derived from shares and share values.
"""

import math
from typing import Any, Dict

from lendcurves.core.models import to_float
from lendcurves.protocols.marginfi.rate_model import MarginfiBankParams, MarginfiRateParams


class MarginfiParser:
    """Parser for Marginfi bank payloads."""

    @staticmethod
    def parse_float(value: Any, default: float = float("nan")) -> float:
        if value is None:
            return default
        return to_float(value)

    @classmethod
    def parse_quantity(cls, raw: Dict[str, Any], side: str) -> float:
        """Raw quantity of one side ("Asset" or "Liability"), before mint scaling."""
        quantity = raw.get(f"total{side}Quantity")
        if quantity is not None:
            return cls.parse_float(quantity)
        shares = cls.parse_float(raw.get(f"total{side}Shares"), 0.0)
        share_value = cls.parse_float(raw.get(f"{side[0].lower()}{side[1:]}ShareValue"), 1.0)
        return shares * share_value

    @classmethod
    def parse_rate_params(cls, config: Dict[str, Any]) -> MarginfiRateParams:
        """Interest rate config, all values fractions."""
        ir = config.get("interestRateConfig") or {}
        return MarginfiRateParams(
            optimal_utilization_rate=cls.parse_float(ir.get("optimalUtilizationRate")),
            plateau_interest_rate=cls.parse_float(ir.get("plateauInterestRate")),
            max_interest_rate=cls.parse_float(ir.get("maxInterestRate")),
            insurance_ir_fee=cls.parse_float(ir.get("insuranceIrFee"), 0.0),
            protocol_ir_fee=cls.parse_float(ir.get("protocolIrFee"), 0.0),
            insurance_fee_fixed_apr=cls.parse_float(ir.get("insuranceFeeFixedApr"), 0.0),
            protocol_fixed_fee_apr=cls.parse_float(ir.get("protocolFixedFeeApr"), 0.0),
        )

    @classmethod
    def parse_bank(cls, raw: Dict[str, Any]) -> MarginfiBankParams:
        """
        Parse a Marginfi bank payload.

        Args:
            raw: Bank payload from the market source

        Returns:
            MarginfiBankParams with token-unit quantities

        Raises:
            ValueError: mint decimals missing or invalid
        """
        decimals = cls.parse_float(raw.get("mintDecimals"))
        if not math.isfinite(decimals):
            raise ValueError("Missing mintDecimals")
        factor = 10.0 ** decimals

        config = raw.get("config") or {}
        return MarginfiBankParams(
            rates=cls.parse_rate_params(config),
            total_assets=cls.parse_quantity(raw, "Asset") / factor,
            total_liabilities=cls.parse_quantity(raw, "Liability") / factor,
            asset_weight_init=cls.parse_float(config.get("assetWeightInit")),
            liability_weight_init=cls.parse_float(config.get("liabilityWeightInit")),
        )
