"""Pydantic settings for the lending rate curve aggregator."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Solana RPC
    rpc_url: str = Field(default="https://api.mainnet-beta.solana.com", description="Solana JSON-RPC endpoint")
    rpc_commitment: str = Field(default="confirmed", description="Commitment level for slot lookups")
    rpc_rate_limit: int = Field(default=40, ge=1, description="Max RPC requests per window")
    rpc_rate_window: int = Field(default=10, ge=1, description="RPC rate limit window in seconds")

    # Protocol snapshots
    kamino_market_address: str = Field(
        default="7u3HeHxYDLhnCoErrtycNokbQYbWGzLs6JSDqGAv5PfF",
        description="Kamino main lending market",
    )
    kamino_snapshot_url: Optional[str] = Field(default=None, description="Kamino reserve snapshot endpoint")
    marginfi_snapshot_url: Optional[str] = Field(default=None, description="Marginfi bank snapshot endpoint")
    snapshot_timeout_seconds: int = Field(default=30, ge=1, le=300, description="HTTP timeout for snapshot loads")

    # Curves
    curve_points: int = Field(default=101, ge=2, le=10001, description="Number of utilization grid points")
    default_optimal_utilization: float = Field(
        default=0.8, ge=0.0, le=1.0, description="Fallback optimal utilization when Marginfi has none"
    )

    # Token registry
    use_full_token_table: bool = Field(default=False, description="Use the full token table instead of USDC/SOL")

    # Environment / debug output
    environment: str = Field(default="development", description="development, staging or production")
    curve_log_enabled: bool = Field(default=False, description="Write the raw Kamino borrow curves per run")
    curve_log_dir: Path = Field(default=Path(".cache/curves"), description="Directory for borrow curve logs")
    log_level: str = Field(default="WARNING", description="Root log level for the entry point")

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        """Lower-case the environment name."""
        if isinstance(v, str):
            return v.strip().lower() or "development"
        return v

    @field_validator("curve_log_dir", mode="before")
    @classmethod
    def parse_curve_log_dir(cls, v):
        """Convert string to Path."""
        if isinstance(v, str):
            return Path(v)
        return v

    @property
    def is_production(self) -> bool:
        """True for hosted deployments, where debug artifacts are never written."""
        return self.environment == "production"

    @property
    def should_write_curve_log(self) -> bool:
        """Whether the borrow curve debug log is written this run."""
        return self.curve_log_enabled and not self.is_production

    def ensure_curve_log_dir(self) -> Path:
        """Ensure the curve log directory exists and return it."""
        self.curve_log_dir.mkdir(parents=True, exist_ok=True)
        return self.curve_log_dir


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
