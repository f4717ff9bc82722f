"""
Crossover detectors over a pair of series.

Semantics (TradingView-aligned):
- cross above: prev_delta <= 0 AND curr_delta > 0
- cross under: prev_delta >= 0 AND curr_delta < 0

where delta = value - base. A fresh detector has prev_delta = 0.0, so
the first tick that leaves zero in either direction counts as a cross.
Moving onto zero is never a cross; moving off zero always is.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CrossAbove:
    """Emits 1.0 on the tick `value` crosses above `base`, else 0.0."""

    _last_delta: float = field(default=0.0, init=False)

    def advance(self, value: float, base: float) -> float:
        delta = value - base
        crossed = self._last_delta <= 0.0 and delta > 0.0
        self._last_delta = delta
        return 1.0 if crossed else 0.0


@dataclass
class CrossUnder:
    """Emits 1.0 on the tick `value` crosses under `base`, else 0.0."""

    _last_delta: float = field(default=0.0, init=False)

    def advance(self, value: float, base: float) -> float:
        delta = value - base
        crossed = self._last_delta >= 0.0 and delta < 0.0
        self._last_delta = delta
        return 1.0 if crossed else 0.0


@dataclass
class Cross:
    """
    Combined crossover signal.

    Returns:
        1.0 on a cross above, -1.0 on a cross under, 0.0 otherwise
    """

    _above: CrossAbove = field(default_factory=CrossAbove, init=False)
    _under: CrossUnder = field(default_factory=CrossUnder, init=False)

    def advance(self, value: float, base: float) -> float:
        return self._above.advance(value, base) - self._under.advance(value, base)
