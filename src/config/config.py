"""
Configuration management for the indicator package.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv

from .constants import (
    DEFAULT_CHAIKIN_MA1,
    DEFAULT_CHAIKIN_MA2,
    DEFAULT_CHAIKIN_WINDOW,
    validate_period,
)


@dataclass
class ChaikinDefaults:
    """
    Default Chaikin Oscillator parameters.

    Moving averages are kept in their string form ("EMA(3)") and parsed
    when a configuration is built, so a bad value surfaces as a
    ParameterParseError from the indicator, not at import time.
    """
    ma1: str = DEFAULT_CHAIKIN_MA1
    ma2: str = DEFAULT_CHAIKIN_MA2
    window: int = DEFAULT_CHAIKIN_WINDOW


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = "logs"


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Priority: .env < env_file (later files override earlier)
        for env_name in [".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=True)

        # Values that could not be read at all; reported by validate()
        self._load_errors: List[str] = []
        self.chaikin = self._load_chaikin_config()
        self.log = self._load_log_config()

        self._initialized = True

    def _load_chaikin_config(self) -> ChaikinDefaults:
        """Load Chaikin Oscillator defaults from environment."""
        raw_window = os.getenv("CHAIKIN_WINDOW", str(DEFAULT_CHAIKIN_WINDOW))
        try:
            window = int(raw_window)
        except ValueError:
            self._load_errors.append(f"INVALID: CHAIKIN_WINDOW={raw_window!r} is not an integer")
            window = DEFAULT_CHAIKIN_WINDOW

        return ChaikinDefaults(
            ma1=os.getenv("CHAIKIN_MA1", DEFAULT_CHAIKIN_MA1),
            ma2=os.getenv("CHAIKIN_MA2", DEFAULT_CHAIKIN_MA2),
            window=window,
        )

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR", "logs"),
        )

    def reload(self, env_file: str = ".env"):
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configured defaults.

        Checks that both moving averages parse and that the defaults form
        a valid Chaikin Oscillator.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        from src.indicators.chaikin_oscillator import ChaikinOscillator
        from src.indicators.errors import ParameterParseError

        errors = list(self._load_errors)
        parse_failed = False
        config = ChaikinOscillator(window=self.chaikin.window)

        for name in ("ma1", "ma2"):
            raw = getattr(self.chaikin, name)
            try:
                config.set_parameter(name, raw)
            except ParameterParseError:
                parse_failed = True
                errors.append(f"INVALID: CHAIKIN_{name.upper()}={raw!r} is not a moving average like 'EMA(3)'")

        if not parse_failed and not config.validate():
            errors.append(
                f"INVALID: CHAIKIN_MA1={self.chaikin.ma1} / CHAIKIN_MA2={self.chaikin.ma2} "
                "must share a family with 0 < ma1 period < ma2 period."
            )

        try:
            validate_period(self.chaikin.window, "CHAIKIN_WINDOW")
        except ValueError as e:
            errors.append(f"INVALID: {e}")

        if self.log.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"INVALID: LOG_LEVEL={self.log.level!r}")

        return len(errors) == 0, errors

    def summary_short(self) -> str:
        """Generate a short one-line configuration summary."""
        c = self.chaikin
        return f"ChaikinOscillator | ma1={c.ma1} ma2={c.ma2} window={c.window} | log={self.log.level}"


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)
