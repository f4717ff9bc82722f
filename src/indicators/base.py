"""
Shared contract for configurable streaming indicators.

An IndicatorConfig is a parameter set that can be validated and then
materialized from a seed candle into an IndicatorInstance. The instance
advances once per candle and returns an IndicatorResult with a fixed
number of values and signals (see IndicatorConfig.output_shape()).

Signals are in [-1.0, 1.0]: positive means buy, negative means sell.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .candle import Candle


@dataclass(frozen=True)
class IndicatorResult:
    """Output of one indicator update."""
    values: tuple[float, ...]
    signals: tuple[float, ...]

    def value(self, index: int = 0) -> float:
        return self.values[index]

    def signal(self, index: int = 0) -> float:
        return self.signals[index]

    @property
    def size(self) -> tuple[int, int]:
        """(value count, signal count)."""
        return len(self.values), len(self.signals)


class IndicatorInstance(ABC):
    """Live, per-candle state of an indicator."""

    @property
    @abstractmethod
    def config(self) -> IndicatorConfig:
        """Configuration this instance was materialized from."""
        ...

    @abstractmethod
    def advance(self, candle: Candle) -> IndicatorResult:
        """Consume the next candle (in arrival order) and return the result."""
        ...

    def over(self, candles: Iterable[Candle]) -> list[IndicatorResult]:
        """Continue the stream over a batch of candles."""
        return [self.advance(candle) for candle in candles]


class IndicatorConfig(ABC):
    """Validated parameter set for an indicator."""

    NAME: ClassVar[str]

    @abstractmethod
    def validate(self) -> bool:
        """True when all parameter invariants hold."""
        ...

    @abstractmethod
    def materialize(self, candle: Candle) -> IndicatorInstance:
        """
        Create a live instance seeded from `candle`.

        Raises:
            InvalidConfigurationError: If validate() is False
        """
        ...

    @abstractmethod
    def set_parameter(self, name: str, value: str) -> None:
        """
        Replace a named parameter from its string form.

        Raises:
            ParameterParseError: If the name is unknown or the value does not parse
        """
        ...

    @abstractmethod
    def output_shape(self) -> tuple[int, int]:
        """(value count, signal count) of every result."""
        ...

    def over(self, candles: Iterable[Candle]) -> list[IndicatorResult]:
        """
        Run the indicator over a batch of candles.

        The instance is seeded from the first candle, then every candle
        (the first included) is advanced, so the output lines up 1:1
        with the input.
        """
        candles = list(candles)
        if not candles:
            return []
        instance = self.materialize(candles[0])
        return instance.over(candles)
