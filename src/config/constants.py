"""
Centralized constants for the indicator package.

Period values mirror an unsigned 8-bit period type: every period and
accumulation window must fit in [0, PERIOD_MAX]. PERIOD_MAX itself is
reserved as an overflow sentinel for moving-average periods.
"""


# ==================== Period Bounds ====================

PERIOD_MAX = 255


# ==================== Chaikin Oscillator Defaults ====================

DEFAULT_CHAIKIN_MA1 = "EMA(3)"   # short smoothing of the AD index
DEFAULT_CHAIKIN_MA2 = "EMA(10)"  # long smoothing of the AD index
DEFAULT_CHAIKIN_WINDOW = 0       # 0 = windowless (cumulative) AD index


def validate_period(period: int, name: str = "period") -> int:
    """
    Validate that a period fits the representable range.

    Args:
        period: The period value to check
        name: Field name used in the error message

    Returns:
        The period, unchanged

    Raises:
        ValueError: If period is outside [0, PERIOD_MAX]
    """
    if not 0 <= period <= PERIOD_MAX:
        raise ValueError(f"{name} must be in [0, {PERIOD_MAX}], got {period}")
    return period
