"""
Indicator Module: configurable streaming indicators.

Components:
- base: IndicatorConfig / IndicatorInstance contract and IndicatorResult
- candle: Candle (OHLCV bar) and DataFrame ingestion
- incremental: seeded streaming primitives (moving averages, ADI, Cross)
- moving_average: MA descriptor ("EMA(3)") and smoothing families
- chaikin_oscillator: Chaikin Oscillator config and instance
- factory: create indicator configs by type string
- compute: DataFrame-based indicator application and pandas reference

Usage:
    from src.indicators import ChaikinOscillator, MA, Candle

    config = ChaikinOscillator(ma1=MA.ema(3), ma2=MA.ema(10), window=0)
    instance = config.materialize(first_candle)
    for candle in stream:
        result = instance.advance(candle)
        oscillator, signal = result.value(), result.signal()
"""

from .errors import (
    IndicatorError,
    InvalidConfigurationError,
    ParameterParseError,
    WrongMethodParametersError,
)
from .candle import Candle, candles_from_frame
from .base import IndicatorConfig, IndicatorInstance, IndicatorResult
from .moving_average import MA, MAFamily
from .chaikin_oscillator import ChaikinOscillator, ChaikinOscillatorInstance
from .factory import create_indicator, supports_indicator, list_indicators
from .compute import apply_indicator, vectorized_chaikin

__all__ = [
    # Errors
    "IndicatorError",
    "InvalidConfigurationError",
    "ParameterParseError",
    "WrongMethodParametersError",
    # Data
    "Candle",
    "candles_from_frame",
    # Contract
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorResult",
    # Moving averages
    "MA",
    "MAFamily",
    # Indicators
    "ChaikinOscillator",
    "ChaikinOscillatorInstance",
    # Factory
    "create_indicator",
    "supports_indicator",
    "list_indicators",
    # Compute
    "apply_indicator",
    "vectorized_chaikin",
]
