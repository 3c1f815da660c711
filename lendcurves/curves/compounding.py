"""APR to APY conversion."""

import math


def apr_to_apy(apr: float, compounding_periods: int) -> float:
    """
    Convert APR to APY with given compounding periods.

    APY = (1 + APR/n)^n - 1

    Evaluated as expm1(n * log1p(APR/n)): with n in the tens of millions the
    naive form loses most significant digits of APR/n when it is added to 1.

    Args:
        apr: Annual Percentage Rate (fraction)
        compounding_periods: Number of compounding periods per year

    Returns:
        Annual Percentage Yield (fraction), NaN for non-finite APR
    """
    if not math.isfinite(apr):
        return float("nan")
    if apr <= 0:
        return 0.0

    n = float(compounding_periods)
    return math.expm1(n * math.log1p(apr / n))
