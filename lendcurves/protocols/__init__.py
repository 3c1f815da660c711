"""Protocol-specific rate models and configuration."""
