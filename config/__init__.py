"""Configuration module for the lending rate curve aggregator."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
