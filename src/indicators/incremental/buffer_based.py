"""
Buffer-based moving averages using ring buffers and running sums.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .base import StreamingMethod


@dataclass
class SeededWMA(StreamingMethod):
    """
    Weighted Moving Average with TRUE O(1) updates.

    Formula:
        wma = sum(weight[i] * value[i]) / sum(weights)
        where weight[i] = i + 1 (linear weights, most recent has highest weight)

    O(1) update technique:
        - New value enters with weight `length` (highest)
        - All existing values shift down, losing 1 from their weight
        - weighted_sum = weighted_sum - buffer_sum + new_value * length
        - The oldest (weight 1) leaves: subtract it from buffer_sum
    """

    length: int
    seed: float
    _buffer: deque = field(default_factory=deque, init=False)
    _weight_divisor: int = field(default=0, init=False)
    _weighted_sum: float = field(default=0.0, init=False)
    _buffer_sum: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        # Weight divisor = 1 + 2 + ... + length = length * (length + 1) / 2
        self._weight_divisor = self.length * (self.length + 1) // 2
        self._buffer.extend([self.seed] * self.length)
        self._buffer_sum = self.seed * self.length
        self._weighted_sum = self.seed * self._weight_divisor

    def advance(self, value: float) -> float:
        oldest = self._buffer.popleft()
        self._buffer.append(value)

        # buffer_sum is taken BEFORE modification
        self._weighted_sum = self._weighted_sum - self._buffer_sum + value * self.length
        self._buffer_sum = self._buffer_sum - oldest + value
        return self.peek()

    def peek(self) -> float:
        return self._weighted_sum / self._weight_divisor
