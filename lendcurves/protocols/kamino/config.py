"""Kamino Lend protocol-specific configuration and constants."""

PROTOCOL_NAME = "Kamino"

# Kamino compounds per slot and assumes two slots per second
SLOTS_PER_SECOND = 2
SLOTS_PER_YEAR = SLOTS_PER_SECOND * 60 * 60 * 24 * 365  # 63,072,000
SLOT_DURATION_MS = 1000 / SLOTS_PER_SECOND

# Main market
KAMINO_MAIN_MARKET = "7u3HeHxYDLhnCoErrtycNokbQYbWGzLs6JSDqGAv5PfF"
