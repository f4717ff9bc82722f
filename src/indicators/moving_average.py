"""
MA: moving-average descriptor.

A descriptor names a smoothing family and a period. It is what indicator
configurations store and what parameter strings parse into; materialize()
turns it into a live, seeded filter.

String form is "<FAMILY>(<period>)", e.g. "EMA(3)", "sma(20)".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from src.config.constants import PERIOD_MAX

from .errors import WrongMethodParametersError
from .incremental import (
    SeededDEMA,
    SeededEMA,
    SeededRMA,
    SeededSMA,
    SeededTEMA,
    SeededWMA,
    StreamingMethod,
)


class MAFamily(str, Enum):
    """Supported smoothing families."""
    SMA = "SMA"    # simple
    WMA = "WMA"    # linearly weighted
    EMA = "EMA"    # exponential, alpha = 2 / (n + 1)
    RMA = "RMA"    # Wilder's, alpha = 1 / n
    DEMA = "DEMA"  # double exponential
    TEMA = "TEMA"  # triple exponential


_FILTERS: dict[MAFamily, type[StreamingMethod]] = {
    MAFamily.SMA: SeededSMA,
    MAFamily.WMA: SeededWMA,
    MAFamily.EMA: SeededEMA,
    MAFamily.RMA: SeededRMA,
    MAFamily.DEMA: SeededDEMA,
    MAFamily.TEMA: SeededTEMA,
}

_MA_PATTERN = re.compile(r"^\s*([A-Za-z]+)\s*\(\s*(\d+)\s*\)\s*$")


@dataclass(frozen=True)
class MA:
    """
    Moving-average descriptor.

    Attributes:
        family: Smoothing family
        period: Smoothing period, in [0, PERIOD_MAX]

    Examples:
        MA.ema(3)
        MA(MAFamily.SMA, 20)
        MA.parse("WMA(14)")
    """
    family: MAFamily
    period: int

    def is_similar_to(self, other: MA) -> bool:
        """True when both descriptors use the same smoothing family."""
        return self.family == other.family

    def materialize(self, seed: float) -> StreamingMethod:
        """
        Create a live filter that starts as if it had already observed `seed`.

        Raises:
            WrongMethodParametersError: If period is 0 or above PERIOD_MAX
        """
        if not 0 < self.period <= PERIOD_MAX:
            raise WrongMethodParametersError(
                self.family.value, f"period must be in [1, {PERIOD_MAX}], got {self.period}"
            )
        return _FILTERS[self.family](length=self.period, seed=seed)

    @classmethod
    def parse(cls, text: str) -> MA:
        """
        Parse "<FAMILY>(<period>)".

        Raises:
            ValueError: If the text is malformed, the family is unknown,
                or the period does not fit in [0, PERIOD_MAX]
        """
        if not isinstance(text, str):
            raise ValueError(f"Moving average must be a string, got {type(text).__name__}")

        match = _MA_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Malformed moving average: {text!r}")

        name, period_str = match.groups()
        try:
            family = MAFamily(name.upper())
        except ValueError:
            valid = ", ".join(f.value for f in MAFamily)
            raise ValueError(f"Unknown moving average '{name}'. Valid: {valid}") from None

        period = int(period_str)
        if period > PERIOD_MAX:
            raise ValueError(f"Moving average period {period} exceeds {PERIOD_MAX}")
        return cls(family, period)

    @classmethod
    def sma(cls, period: int) -> MA:
        return cls(MAFamily.SMA, period)

    @classmethod
    def wma(cls, period: int) -> MA:
        return cls(MAFamily.WMA, period)

    @classmethod
    def ema(cls, period: int) -> MA:
        return cls(MAFamily.EMA, period)

    @classmethod
    def rma(cls, period: int) -> MA:
        return cls(MAFamily.RMA, period)

    @classmethod
    def dema(cls, period: int) -> MA:
        return cls(MAFamily.DEMA, period)

    @classmethod
    def tema(cls, period: int) -> MA:
        return cls(MAFamily.TEMA, period)

    def __str__(self) -> str:
        return f"{self.family.value}({self.period})"
