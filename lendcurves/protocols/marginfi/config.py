"""Marginfi protocol-specific configuration and constants."""

from lendcurves.core.constants import HOURS_PER_YEAR, MINUTES_PER_YEAR

PROTOCOL_NAME = "Marginfi"

# Bank point-in-time APYs compound hourly (mrgn-common aprToApy default)
BANK_COMPOUNDING_PERIODS = HOURS_PER_YEAR

# Charted curves approximate continuous compounding
CURVE_COMPOUNDING_PERIODS = MINUTES_PER_YEAR
