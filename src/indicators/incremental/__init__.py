"""
Seeded streaming primitives for incremental indicators.

O(1) per-bar updates. Every primitive is built from a seed value (or seed
candle) and produces output from the first update on, so composite
indicators can wire several of them without aligning warmup periods.

Usage:
    from src.indicators.incremental import SeededEMA, ADI, Cross

    adi = ADI(window=0, seed=first_candle)
    ema = SeededEMA(length=3, seed=adi.peek())
    for candle in candles:
        smoothed = ema.advance(adi.advance(candle))
"""

from __future__ import annotations

# Base class
from .base import StreamingMethod

# Moving averages
from .core import SeededEMA, SeededRMA, SeededSMA
from .ema_composable import SeededDEMA, SeededTEMA
from .buffer_based import SeededWMA

# Accumulators
from .volume import ADI

# Crossover detectors
from .cross import Cross, CrossAbove, CrossUnder

__all__ = [
    # Base
    "StreamingMethod",
    # Moving averages
    "SeededEMA",
    "SeededRMA",
    "SeededSMA",
    "SeededDEMA",
    "SeededTEMA",
    "SeededWMA",
    # Accumulators
    "ADI",
    # Crossover detectors
    "Cross",
    "CrossAbove",
    "CrossUnder",
]
