"""
Factory for creating indicator configurations by type string.

Provides create_indicator() to build any registered indicator config from
a type string and parameter dict, plus registry query functions.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from src.utils.logger import get_logger

from .base import IndicatorConfig
from .chaikin_oscillator import ChaikinOscillator


# =============================================================================
# Registry
# =============================================================================


_FACTORY: dict[str, type[IndicatorConfig]] = {
    "chaikin_oscillator": ChaikinOscillator,
}

# Parameters applied through set_parameter() from their string form
_STRING_PARAMS: dict[str, frozenset[str]] = {
    "chaikin_oscillator": frozenset({"ma1", "ma2"}),
}

# Integer parameters applied by direct field replacement
_FIELD_PARAMS: dict[str, frozenset[str]] = {
    "chaikin_oscillator": frozenset({"window"}),
}

_ALIASES: dict[str, str] = {cls.NAME.lower(): key for key, cls in _FACTORY.items()}


def _normalize(indicator_type: str) -> str:
    key = indicator_type.lower()
    return _ALIASES.get(key, key)


def _validate_params(indicator_type: str, params: dict[str, Any]) -> None:
    """Raise ValueError if params contains unknown keys for this indicator."""
    valid = _STRING_PARAMS[indicator_type] | _FIELD_PARAMS[indicator_type]
    unknown = set(params.keys()) - valid
    if unknown:
        raise ValueError(
            f"Unknown params for '{indicator_type}': {sorted(unknown)}. "
            f"Valid: {sorted(valid)}"
        )


def create_indicator(
    indicator_type: str,
    params: dict[str, Any] | None = None,
) -> IndicatorConfig | None:
    """
    Create an indicator config from type and params.

    Starts from the indicator's defaults. String parameters (e.g. "ma1":
    "EMA(5)") go through set_parameter(); field parameters (e.g. "window")
    replace the field directly. The result is not validated here, call
    validate() or materialize() for that.

    Returns None if the indicator type is not registered.

    Raises:
        ValueError: If params contains unknown keys
        ParameterParseError: If a string parameter does not parse
    """
    params = params or {}
    key = _normalize(indicator_type)

    config_cls = _FACTORY.get(key)
    if config_cls is None:
        get_logger().warning(f"Unknown indicator type: {indicator_type}")
        return None

    _validate_params(key, params)

    field_values = {k: int(v) for k, v in params.items() if k in _FIELD_PARAMS[key]}
    config = replace(config_cls(), **field_values)

    for name, value in params.items():
        if name in _STRING_PARAMS[key]:
            config.set_parameter(name, str(value))

    get_logger().debug(f"Created {config_cls.NAME}: {config}")
    return config


def supports_indicator(indicator_type: str) -> bool:
    """Check if an indicator type is registered."""
    return _normalize(indicator_type) in _FACTORY


def list_indicators() -> list[str]:
    """Get list of all registered indicator types."""
    return sorted(_FACTORY)
