"""
EMA-composable moving averages built on top of SeededEMA.

DEMA and TEMA chain EMA layers; every layer is seeded with the same value,
so a constant input stream leaves all layers (and the output) unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import StreamingMethod
from .core import SeededEMA


@dataclass
class SeededDEMA(StreamingMethod):
    """
    Double Exponential Moving Average with O(1) updates.

    Formula:
        dema = 2 * ema1 - ema2
        where ema2 = ema(ema1)
    """

    length: int
    seed: float
    _ema1: SeededEMA = field(init=False)
    _ema2: SeededEMA = field(init=False)

    def __post_init__(self) -> None:
        self._ema1 = SeededEMA(length=self.length, seed=self.seed)
        self._ema2 = SeededEMA(length=self.length, seed=self.seed)

    def advance(self, value: float) -> float:
        e1 = self._ema1.advance(value)
        self._ema2.advance(e1)
        return self.peek()

    def peek(self) -> float:
        return 2.0 * self._ema1.peek() - self._ema2.peek()


@dataclass
class SeededTEMA(StreamingMethod):
    """
    Triple Exponential Moving Average with O(1) updates.

    Formula:
        tema = 3 * ema1 - 3 * ema2 + ema3
        where ema2 = ema(ema1), ema3 = ema(ema2)
    """

    length: int
    seed: float
    _ema1: SeededEMA = field(init=False)
    _ema2: SeededEMA = field(init=False)
    _ema3: SeededEMA = field(init=False)

    def __post_init__(self) -> None:
        self._ema1 = SeededEMA(length=self.length, seed=self.seed)
        self._ema2 = SeededEMA(length=self.length, seed=self.seed)
        self._ema3 = SeededEMA(length=self.length, seed=self.seed)

    def advance(self, value: float) -> float:
        e1 = self._ema1.advance(value)
        e2 = self._ema2.advance(e1)
        self._ema3.advance(e2)
        return self.peek()

    def peek(self) -> float:
        return 3.0 * self._ema1.peek() - 3.0 * self._ema2.peek() + self._ema3.peek()
