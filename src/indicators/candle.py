"""
Candle: a single OHLCV observation fed to streaming indicators.

Only the fields are required by the indicators; the timestamp is carried
along for callers that build candles from exchange frames.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import pandas as pd


_OHLCV_COLUMNS = ("open", "high", "low", "close", "volume")


@dataclass(frozen=True)
class Candle:
    """Single OHLCV bar."""
    open: float
    high: float
    low: float
    close: float
    volume: float
    timestamp: pd.Timestamp | None = None

    def clv(self) -> float:
        """
        Close Location Value.

        Formula:
            clv = ((close - low) - (high - close)) / (high - low)

        Returns 0.0 for a flat bar (high == low).
        """
        if self.high == self.low:
            return 0.0
        return ((self.close - self.low) - (self.high - self.close)) / (self.high - self.low)

    def tp(self) -> float:
        """Typical price (high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3.0

    @classmethod
    def from_row(cls, row: Any, timestamp: pd.Timestamp | None = None) -> Candle:
        """Build a candle from a mapping or pandas row with OHLCV keys."""
        return cls(
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row["volume"]),
            timestamp=timestamp,
        )


def candles_from_frame(df: pd.DataFrame) -> Iterator[Candle]:
    """
    Iterate an OHLCV DataFrame as candles, oldest first.

    Column names are matched case-insensitively. The index is used as the
    candle timestamp when it is a DatetimeIndex.

    Raises:
        ValueError: If any OHLCV column is missing
    """
    columns = {c.lower(): c for c in df.columns}
    missing = [c for c in _OHLCV_COLUMNS if c not in columns]
    if missing:
        raise ValueError(f"DataFrame is missing OHLCV columns: {missing}")

    frame = df[[columns[c] for c in _OHLCV_COLUMNS]]
    frame.columns = list(_OHLCV_COLUMNS)
    with_ts = isinstance(df.index, pd.DatetimeIndex)

    for ts, row in frame.iterrows():
        yield Candle.from_row(row, timestamp=ts if with_ts else None)
