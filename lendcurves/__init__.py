"""Lending rate curves for Solana lending protocols."""

__version__ = "0.1.0"
