"""
Chaikin Oscillator.

Difference between a short and a long smoothing of the Accumulation/
Distribution Index, with a signal on zero-line crossings.

Links:
    https://en.wikipedia.org/wiki/Chaikin_Analytics

1 value:
    oscillator = ma1(adi) - ma2(adi)

1 signal:
    1.0 when the oscillator goes above zero (full buy),
    -1.0 when it goes below zero (full sell),
    0.0 otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar

from src.config.constants import PERIOD_MAX

from .base import IndicatorConfig, IndicatorInstance, IndicatorResult
from .candle import Candle
from .errors import InvalidConfigurationError, ParameterParseError
from .incremental import ADI, Cross, StreamingMethod
from .moving_average import MA


@dataclass
class ChaikinOscillator(IndicatorConfig):
    """
    Chaikin Oscillator configuration.

    Attributes:
        ma1: Short smoothing of the AD index. Default EMA(3).
            Period in [1, ma2.period).
        ma2: Long smoothing of the AD index. Default EMA(10).
            Period in (ma1.period, PERIOD_MAX).
        window: AD index window. Default 0 (windowless).
            Range in [0, PERIOD_MAX]; checked by ADI at materialize time.

    ma1 and ma2 must belong to the same smoothing family.
    """

    NAME: ClassVar[str] = "ChaikinOscillator"

    ma1: MA = field(default_factory=lambda: MA.ema(3))
    ma2: MA = field(default_factory=lambda: MA.ema(10))
    window: int = 0

    def validate(self) -> bool:
        return (
            self.ma1.is_similar_to(self.ma2)
            and self.ma1.period > 0
            and self.ma1.period < self.ma2.period
            and self.ma2.period < PERIOD_MAX
        )

    def materialize(self, candle: Candle) -> ChaikinOscillatorInstance:
        if not self.validate():
            raise InvalidConfigurationError(self.NAME, self)

        adi = ADI(window=self.window, seed=candle)

        # Both filters start from the current AD value without consuming a tick.
        # The instance keeps its own copy of the config.
        return ChaikinOscillatorInstance(
            cfg=replace(self),
            adi=adi,
            ma1=self.ma1.materialize(adi.peek()),
            ma2=self.ma2.materialize(adi.peek()),
            cross_over=Cross(),
        )

    def set_parameter(self, name: str, value: str) -> None:
        if name not in ("ma1", "ma2"):
            raise ParameterParseError(name, value)

        try:
            parsed = MA.parse(value)
        except ValueError:
            raise ParameterParseError(name, value) from None

        setattr(self, name, parsed)

    def output_shape(self) -> tuple[int, int]:
        return 1, 1


@dataclass
class ChaikinOscillatorInstance(IndicatorInstance):
    """Live Chaikin Oscillator state. Created by ChaikinOscillator.materialize()."""

    cfg: ChaikinOscillator
    adi: ADI
    ma1: StreamingMethod
    ma2: StreamingMethod
    cross_over: Cross

    @property
    def config(self) -> ChaikinOscillator:
        return self.cfg

    def advance(self, candle: Candle) -> IndicatorResult:
        adi = self.adi.advance(candle)

        data1 = self.ma1.advance(adi)
        data2 = self.ma2.advance(adi)

        value = data1 - data2
        signal = self.cross_over.advance(value, 0.0)

        return IndicatorResult(values=(value,), signals=(signal,))
