"""
Logging system for the indicator package.
Provides structured, human-readable logs with file and console output.

Indicator math never logs; configuration loading, the factory, batch
application and the CLI do.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        # Colorize a copy so the file handler still sees plain text
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class IndicatorLogger:
    """
    Central logging system for indicators.

    Features:
    - Console output with colors
    - Daily file output
    - Separate log files for signals and errors
    """

    _instance: Optional['IndicatorLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "logs", log_level: str = "INFO"):
        if IndicatorLogger._initialized:
            return

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger("indicators", log_level)
        self.signal_logger = self._create_logger("indicators.signals", log_level, "signals")
        self.error_logger = self._create_logger("indicators.errors", "ERROR", "errors")

        IndicatorLogger._initialized = True

    def _create_logger(self, name: str, level: str, file_prefix: str = None) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False
        logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        # File handler (plain text, no colors)
        prefix = file_prefix or "indicators"
        log_file = self.log_dir / f"{prefix}_{datetime.now().strftime('%Y%m%d')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

        return logger

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.main_logger.error(msg, *args, **kwargs)
        self.error_logger.error(msg, *args, **kwargs)

    def signal(self, indicator: str, value: float, signal: float, **kwargs):
        """
        Log an indicator signal with structured format.

        Args:
            indicator: Indicator name (e.g., ChaikinOscillator)
            value: Indicator value on the signalling bar
            signal: Signal strength in [-1.0, 1.0]
            **kwargs: Additional fields (e.g., symbol, timestamp)
        """
        side = "BUY" if signal > 0 else "SELL" if signal < 0 else "NONE"
        parts = [
            f"[SIGNAL:{side}]",
            f"indicator={indicator}",
            f"value={value:.4f}",
            f"strength={signal:+.2f}",
        ]

        for key, val in kwargs.items():
            parts.append(f"{key}={val}")

        msg = " | ".join(parts)
        self.signal_logger.info(msg)


# Global logger instance
_logger: Optional[IndicatorLogger] = None


def get_logger(log_dir: str = "logs", log_level: str = "INFO") -> IndicatorLogger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = IndicatorLogger(log_dir, log_level)
    return _logger


def setup_logger(log_dir: str = "logs", log_level: str = "INFO") -> IndicatorLogger:
    """Initialize the logger with custom settings."""
    global _logger
    IndicatorLogger._initialized = False
    IndicatorLogger._instance = None
    _logger = IndicatorLogger(log_dir, log_level)
    return _logger
