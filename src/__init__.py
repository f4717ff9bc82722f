"""
Streaming technical indicators.

Per-bar (O(1)) indicator updates built from a shared configuration /
instance contract, starting with the Chaikin Oscillator.
"""

__version__ = "1.0.0"

from .config import get_config
from .indicators import (
    ChaikinOscillator,
    IndicatorResult,
    MA,
    create_indicator,
)

__all__ = [
    "__version__",
    "get_config",
    "ChaikinOscillator",
    "IndicatorResult",
    "MA",
    "create_indicator",
]
