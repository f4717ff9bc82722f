"""
Pytest configuration for streaming indicator tests.
"""

import pytest

from src.config.config import Config
from src.indicators import ChaikinOscillator, MA
from src.indicators.candle import Candle, candles_from_frame
from src.utils.logger import setup_logger
from tests.streaming.harness.bars import candles_for_adi, random_ohlcv_frame


@pytest.fixture(autouse=True, scope="session")
def _test_logger(tmp_path_factory):
    """Route indicator logs to a temporary directory."""
    return setup_logger(str(tmp_path_factory.mktemp("logs")), "DEBUG")


@pytest.fixture
def fresh_config(monkeypatch):
    """Reset the Config singleton around a test."""
    for name in ("CHAIKIN_MA1", "CHAIKIN_MA2", "CHAIKIN_WINDOW", "LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def default_oscillator() -> ChaikinOscillator:
    """Default Chaikin Oscillator: EMA(3) / EMA(10), windowless."""
    return ChaikinOscillator()


@pytest.fixture
def sma_oscillator() -> ChaikinOscillator:
    """SMA-family Chaikin Oscillator with a 5-bar AD window."""
    return ChaikinOscillator(ma1=MA.sma(3), ma2=MA.sma(10), window=5)


@pytest.fixture
def scenario_candles() -> list[Candle]:
    """Seed + 5 candles; AD index path [0, 5, 10, 3, -2, -8]."""
    return candles_for_adi([0, 5, 10, 3, -2, -8])


@pytest.fixture
def ohlcv_frame():
    """200-bar random-walk OHLCV frame."""
    return random_ohlcv_frame()


@pytest.fixture
def random_candles(ohlcv_frame) -> list[Candle]:
    """Candles from the random-walk frame."""
    return list(candles_from_frame(ohlcv_frame))
