"""Generic constants for rate curve calculations.

These constants are protocol-agnostic. Protocol-specific values live in
lendcurves.protocols.<protocol>.config.
"""

# Time constants
MINUTES_PER_YEAR = 365 * 24 * 60  # 525,600
HOURS_PER_YEAR = 365 * 24  # 8,760

# Precision constants
ONE_HUNDRED_PCT_IN_BPS = 10_000
PERCENT = 100.0

# Floor for interpolation / slope denominators
CURVE_EPSILON = 1e-9

# Utilization grid
DEFAULT_CURVE_POINTS = 101  # 0..100 in 1% steps
GRID_DECIMALS = 6
