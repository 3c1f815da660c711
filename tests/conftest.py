"""Pytest configuration and fixtures."""

import pytest
from typing import Any, Dict

from config.settings import Settings
from lendcurves.data.context import AggregationContext
from lendcurves.data.tokens import SOL, USDC

USDC_BANK = "2s37akK2eyBbp8DZgCm7RtsaEz8eJP3Nxd4urLHQv7yB"
SOL_BANK = "CCKtUs6Cgwo4aaQUmBPmyoApH2gUDErxNZCAntD6LYGh"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        environment="development",
        curve_log_enabled=False,
        curve_log_dir=tmp_path / "curves",
        kamino_snapshot_url=None,
        marginfi_snapshot_url=None,
    )


@pytest.fixture
def mock_settings():
    """Create mock settings for testing."""
    from unittest.mock import MagicMock

    settings = MagicMock()
    settings.rpc_url = "https://rpc.test"
    settings.rpc_commitment = "confirmed"
    settings.rpc_rate_limit = 100
    settings.rpc_rate_window = 1
    settings.snapshot_timeout_seconds = 5
    settings.curve_points = 101
    settings.default_optimal_utilization = 0.8
    settings.use_full_token_table = False
    settings.should_write_curve_log = False
    return settings


@pytest.fixture
def context() -> AggregationContext:
    """Fresh aggregation context on the default 101 point grid."""
    return AggregationContext()


@pytest.fixture
def tokens():
    """Partial registry: USDC then SOL."""
    return {USDC_BANK: USDC, SOL_BANK: SOL}


@pytest.fixture
def sample_kamino_reserve() -> Dict[str, Any]:
    """Kamino reserve at 50% utilization with a kinked curve at 80%."""
    return {
        "mintDecimals": 6,
        "totalSupply": "1000000000000",  # 1,000,000 tokens
        "borrowedAmount": "500000000000",  # 500,000 tokens
        "protocolTakeRatePct": 10,
        "loanToValuePct": 80,
        "borrowFactorPct": 125,
        "hostFixedInterestRateBps": 0,
        "borrowRateCurve": {
            "points": [
                {"utilizationRateBps": 0, "borrowRateBps": 0},
                {"utilizationRateBps": 8000, "borrowRateBps": 1000},
                {"utilizationRateBps": 10000, "borrowRateBps": 5000},
                {"utilizationRateBps": 10000, "borrowRateBps": 5000},
                {"utilizationRateBps": 10000, "borrowRateBps": 5000},
            ]
        },
    }


@pytest.fixture
def sample_marginfi_bank() -> Dict[str, Any]:
    """Marginfi bank at 50% utilization, optimal 80%, plateau 10%, max 100%."""
    return {
        "mintDecimals": 9,
        "totalAssetQuantity": "2000000000000000",  # 2,000,000 tokens
        "totalLiabilityQuantity": "1000000000000000",  # 1,000,000 tokens
        "config": {
            "assetWeightInit": "0.8",
            "liabilityWeightInit": "1.25",
            "interestRateConfig": {
                "optimalUtilizationRate": "0.8",
                "plateauInterestRate": "0.1",
                "maxInterestRate": "1.0",
                "insuranceIrFee": "0",
                "protocolIrFee": "0.1",
                "insuranceFeeFixedApr": "0",
                "protocolFixedFeeApr": "0.01",
            },
        },
    }
