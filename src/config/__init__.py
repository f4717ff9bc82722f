"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    ChaikinDefaults,
    LogConfig,
)

from .constants import (
    PERIOD_MAX,
    DEFAULT_CHAIKIN_MA1,
    DEFAULT_CHAIKIN_MA2,
    DEFAULT_CHAIKIN_WINDOW,
    validate_period,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "ChaikinDefaults",
    "LogConfig",
    # Constants
    "PERIOD_MAX",
    "DEFAULT_CHAIKIN_MA1",
    "DEFAULT_CHAIKIN_MA2",
    "DEFAULT_CHAIKIN_WINDOW",
    "validate_period",
]
