"""
Tests for Chaikin Oscillator configuration: validation, materialize,
named-parameter mutation and output shape.

Validation rule:
    ma1 similar to ma2 AND 0 < ma1.period < ma2.period < PERIOD_MAX
"""

from dataclasses import replace

import pytest

from src.config.constants import PERIOD_MAX
from src.indicators import (
    ChaikinOscillator,
    ChaikinOscillatorInstance,
    InvalidConfigurationError,
    MA,
    MAFamily,
    ParameterParseError,
    WrongMethodParametersError,
)
from tests.streaming.harness.bars import money_flow_candle


# =============================================================================
# Defaults
# =============================================================================

class TestDefaults:
    """Default configuration."""

    def test_default_parameters(self, default_oscillator: ChaikinOscillator):
        assert default_oscillator.ma1 == MA.ema(3)
        assert default_oscillator.ma2 == MA.ema(10)
        assert default_oscillator.window == 0

    def test_default_validates(self, default_oscillator: ChaikinOscillator):
        assert default_oscillator.validate() is True

    def test_name(self):
        assert ChaikinOscillator.NAME == "ChaikinOscillator"

    def test_defaults_are_independent(self):
        a = ChaikinOscillator()
        b = ChaikinOscillator()
        a.set_parameter("ma1", "EMA(5)")
        assert b.ma1 == MA.ema(3)


# =============================================================================
# Validation
# =============================================================================

INVALID_CONFIGS = [
    pytest.param(MA.ema(10), MA.ema(3), id="periods_reversed"),
    pytest.param(MA.ema(5), MA.ema(5), id="periods_equal"),
    pytest.param(MA.ema(0), MA.ema(10), id="zero_short_period"),
    pytest.param(MA.ema(3), MA.ema(PERIOD_MAX), id="long_period_at_max"),
    pytest.param(MA.sma(3), MA.ema(10), id="different_families"),
    pytest.param(MA.wma(3), MA.dema(10), id="different_families_wma_dema"),
]

VALID_CONFIGS = [
    pytest.param(MA.ema(1), MA.ema(2), id="smallest"),
    pytest.param(MA.ema(3), MA.ema(PERIOD_MAX - 1), id="largest_long_period"),
    pytest.param(MA.sma(3), MA.sma(10), id="sma"),
    pytest.param(MA.wma(5), MA.wma(20), id="wma"),
    pytest.param(MA.rma(2), MA.rma(14), id="rma"),
    pytest.param(MA.dema(3), MA.dema(10), id="dema"),
    pytest.param(MA.tema(3), MA.tema(10), id="tema"),
]


class TestValidate:
    """validate() is True iff every clause holds."""

    @pytest.mark.parametrize("ma1,ma2", VALID_CONFIGS)
    def test_valid(self, ma1: MA, ma2: MA):
        assert ChaikinOscillator(ma1=ma1, ma2=ma2).validate() is True

    @pytest.mark.parametrize("ma1,ma2", INVALID_CONFIGS)
    def test_invalid(self, ma1: MA, ma2: MA):
        assert ChaikinOscillator(ma1=ma1, ma2=ma2).validate() is False

    def test_window_is_not_part_of_validate(self):
        """Window range is checked by the accumulator, not validate()."""
        assert ChaikinOscillator(window=PERIOD_MAX + 1).validate() is True

    def test_validate_is_pure(self, default_oscillator: ChaikinOscillator):
        before = replace(default_oscillator)
        for _ in range(3):
            default_oscillator.validate()
        assert default_oscillator == before


# =============================================================================
# Materialize
# =============================================================================

class TestMaterialize:
    """materialize() builds a wired instance or raises."""

    def test_returns_instance(self, default_oscillator: ChaikinOscillator):
        instance = default_oscillator.materialize(money_flow_candle(0))
        assert isinstance(instance, ChaikinOscillatorInstance)
        assert instance.config == default_oscillator

    @pytest.mark.parametrize("ma1,ma2", INVALID_CONFIGS)
    def test_invalid_raises(self, ma1: MA, ma2: MA):
        config = ChaikinOscillator(ma1=ma1, ma2=ma2)
        with pytest.raises(InvalidConfigurationError) as exc_info:
            config.materialize(money_flow_candle(0))
        assert exc_info.value.indicator_name == "ChaikinOscillator"

    def test_reversed_periods_scenario(self):
        """EMA(10) / EMA(3) must fail and build nothing."""
        config = ChaikinOscillator(ma1=MA.ema(10), ma2=MA.ema(3), window=0)
        with pytest.raises(InvalidConfigurationError):
            config.materialize(money_flow_candle(5))

    def test_window_error_propagates_unwrapped(self):
        config = ChaikinOscillator(window=PERIOD_MAX + 1)
        with pytest.raises(WrongMethodParametersError) as exc_info:
            config.materialize(money_flow_candle(0))
        assert not isinstance(exc_info.value, InvalidConfigurationError)
        assert exc_info.value.method == "ADI"

    def test_max_window_accepted(self):
        config = ChaikinOscillator(window=PERIOD_MAX)
        assert config.materialize(money_flow_candle(1)) is not None

    def test_filters_seeded_from_current_adi(self):
        """Both filters start at the seed AD value without consuming a tick."""
        instance = ChaikinOscillator().materialize(money_flow_candle(7))
        assert instance.adi.peek() == 7.0
        assert instance.ma1.peek() == 7.0
        assert instance.ma2.peek() == 7.0

    def test_windowed_seed(self):
        instance = ChaikinOscillator(window=4).materialize(money_flow_candle(2))
        assert instance.adi.peek() == 8.0
        assert instance.ma1.peek() == instance.ma2.peek() == 8.0

    def test_instance_config_detached_from_later_mutation(self, default_oscillator):
        instance = default_oscillator.materialize(money_flow_candle(0))
        default_oscillator.set_parameter("ma1", "EMA(5)")
        assert instance.config.ma1 == MA.ema(3)


# =============================================================================
# set_parameter
# =============================================================================

class TestSetParameter:
    """Named parameter mutation."""

    def test_set_ma1(self, default_oscillator: ChaikinOscillator):
        default_oscillator.set_parameter("ma1", "EMA(5)")
        assert default_oscillator.ma1 == MA.ema(5)

        instance = default_oscillator.materialize(money_flow_candle(0))
        assert instance.config.ma1.period == 5

    def test_set_ma2(self, default_oscillator: ChaikinOscillator):
        default_oscillator.set_parameter("ma2", "ema(21)")
        assert default_oscillator.ma2 == MA(MAFamily.EMA, 21)

    def test_unknown_name(self, default_oscillator: ChaikinOscillator):
        before = replace(default_oscillator)
        with pytest.raises(ParameterParseError) as exc_info:
            default_oscillator.set_parameter("unknown", "x")
        assert exc_info.value.name == "unknown"
        assert exc_info.value.value == "x"
        assert default_oscillator == before

    def test_window_not_settable_by_name(self, default_oscillator: ChaikinOscillator):
        with pytest.raises(ParameterParseError):
            default_oscillator.set_parameter("window", "5")
        assert default_oscillator.window == 0

    @pytest.mark.parametrize("raw", ["EMA(x)", "FOO(3)", "EMA(256)", "EMA", "", "EMA(-1)"])
    def test_unparsable_value(self, default_oscillator: ChaikinOscillator, raw: str):
        before = replace(default_oscillator)
        with pytest.raises(ParameterParseError) as exc_info:
            default_oscillator.set_parameter("ma1", raw)
        assert exc_info.value.name == "ma1"
        assert exc_info.value.value == raw
        assert default_oscillator == before

    @pytest.mark.parametrize("raw", [None, 3, MA.ema(5)])
    def test_non_string_value(self, default_oscillator: ChaikinOscillator, raw):
        before = replace(default_oscillator)
        with pytest.raises(ParameterParseError) as exc_info:
            default_oscillator.set_parameter("ma1", raw)
        assert exc_info.value.value is raw
        assert default_oscillator == before

    def test_no_cross_field_validation(self, default_oscillator: ChaikinOscillator):
        """Mutation accepts values that break validate(); materialize catches them."""
        default_oscillator.set_parameter("ma1", "EMA(20)")
        assert default_oscillator.validate() is False
        with pytest.raises(InvalidConfigurationError):
            default_oscillator.materialize(money_flow_candle(0))

    def test_switch_family(self, default_oscillator: ChaikinOscillator):
        default_oscillator.set_parameter("ma1", "SMA(3)")
        assert default_oscillator.validate() is False
        default_oscillator.set_parameter("ma2", "SMA(10)")
        assert default_oscillator.validate() is True


# =============================================================================
# Output shape
# =============================================================================

class TestOutputShape:
    """output_shape() is static."""

    @pytest.mark.parametrize("ma1,ma2", VALID_CONFIGS + INVALID_CONFIGS)
    def test_shape_always_one_one(self, ma1: MA, ma2: MA):
        assert ChaikinOscillator(ma1=ma1, ma2=ma2).output_shape() == (1, 1)

    def test_result_matches_shape(self, default_oscillator, scenario_candles):
        instance = default_oscillator.materialize(scenario_candles[0])
        result = instance.advance(scenario_candles[1])
        assert result.size == default_oscillator.output_shape()
