"""
Core seeded moving averages: EMA, RMA, SMA.

Each filter starts as if it had already observed its seed value for a
full period, so there is no warmup and no NaN output.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .base import StreamingMethod


@dataclass
class SeededEMA(StreamingMethod):
    """
    Exponential Moving Average with O(1) updates.

    Formula:
        alpha = 2 / (length + 1)
        ema = alpha * value + (1 - alpha) * ema_prev

    The first ema_prev is the seed.
    """

    length: int
    seed: float
    _alpha: float = field(init=False)
    _value: float = field(init=False)

    def __post_init__(self) -> None:
        self._alpha = 2.0 / (self.length + 1)
        self._value = self.seed

    def advance(self, value: float) -> float:
        self._value = self._alpha * value + (1 - self._alpha) * self._value
        return self._value

    def peek(self) -> float:
        return self._value


@dataclass
class SeededRMA(StreamingMethod):
    """
    Wilder's running moving average with O(1) updates.

    Formula:
        alpha = 1 / length
        rma = alpha * value + (1 - alpha) * rma_prev
    """

    length: int
    seed: float
    _alpha: float = field(init=False)
    _value: float = field(init=False)

    def __post_init__(self) -> None:
        self._alpha = 1.0 / self.length
        self._value = self.seed

    def advance(self, value: float) -> float:
        self._value = self._alpha * value + (1 - self._alpha) * self._value
        return self._value

    def peek(self) -> float:
        return self._value


@dataclass
class SeededSMA(StreamingMethod):
    """
    Simple Moving Average with O(1) updates using ring buffer.

    Uses running sum technique:
        sma = (sum + new - oldest) / length

    The buffer is prefilled with `length` copies of the seed.
    """

    length: int
    seed: float
    _buffer: deque = field(default_factory=deque, init=False)
    _running_sum: float = field(init=False)

    def __post_init__(self) -> None:
        self._buffer.extend([self.seed] * self.length)
        self._running_sum = self.seed * self.length

    def advance(self, value: float) -> float:
        oldest = self._buffer.popleft()
        self._buffer.append(value)
        self._running_sum += value - oldest
        return self._running_sum / self.length

    def peek(self) -> float:
        return self._running_sum / self.length
