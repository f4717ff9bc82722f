"""
Volume-based accumulators.

Includes ADI, the Accumulation/Distribution Index, which Chaikin-style
oscillators smooth with two moving averages.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from src.config.constants import PERIOD_MAX

from ..candle import Candle
from ..errors import WrongMethodParametersError
from .base import StreamingMethod


@dataclass
class ADI(StreamingMethod):
    """
    Accumulation/Distribution Index with O(1) updates.

    Formula:
        money_flow = clv * volume
        adi = sum(money_flow)                  (window == 0, cumulative)
        adi = sum(money_flow[-window:])        (window > 0, trailing)

    Seeding:
        window == 0: the running total starts at the seed candle's money flow.
        window > 0: the window is prefilled with the seed candle's money flow,
        so the total starts at money_flow * window.

    Raises:
        WrongMethodParametersError: If window is outside [0, PERIOD_MAX]
    """

    window: int
    seed: Candle
    _buffer: deque = field(default_factory=deque, init=False)
    _sum: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if not 0 <= self.window <= PERIOD_MAX:
            raise WrongMethodParametersError(
                "ADI", f"window must be in [0, {PERIOD_MAX}], got {self.window}"
            )

        money_flow = self.seed.clv() * self.seed.volume
        if self.window == 0:
            self._sum = money_flow
        else:
            self._buffer.extend([money_flow] * self.window)
            self._sum = money_flow * self.window

    def advance(self, value: Candle) -> float:
        money_flow = value.clv() * value.volume
        self._sum += money_flow

        if self.window:
            self._sum -= self._buffer.popleft()
            self._buffer.append(money_flow)

        return self._sum

    def peek(self) -> float:
        return self._sum
