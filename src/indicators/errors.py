"""
Exceptions raised by indicator configuration and streaming primitives.

Configuration errors are raised before any instance exists; once an
instance is materialized, per-bar updates never raise.
"""


class IndicatorError(Exception):
    """Base class for indicator errors."""


class InvalidConfigurationError(IndicatorError):
    """Raised by materialize() when a configuration fails validation."""

    def __init__(self, indicator_name: str, config: object | None = None):
        self.indicator_name = indicator_name
        self.config = config
        detail = f": {config!r}" if config is not None else ""
        super().__init__(f"Invalid configuration for {indicator_name}{detail}")


class ParameterParseError(IndicatorError):
    """Raised when a named parameter is unknown or its value cannot be parsed."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Unable to parse parameter '{name}' from value {value!r}")


class WrongMethodParametersError(IndicatorError):
    """Raised when a streaming primitive is constructed with out-of-range parameters."""

    def __init__(self, method: str, reason: str):
        self.method = method
        self.reason = reason
        super().__init__(f"{method}: {reason}")
