"""
Batch application of streaming indicators to OHLCV DataFrames.

apply_indicator() runs a config over a frame bar by bar (the same code
path as live updates). vectorized_chaikin() is an independent pandas
computation of the EMA-family Chaikin Oscillator used for parity checks.

The engine uses only values available at or before the current bar (no look-ahead).
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from src.utils.logger import get_logger

from .base import IndicatorConfig
from .candle import candles_from_frame


def _column_names(prefix: str, kind: str, count: int) -> list[str]:
    if count == 1:
        return [f"{prefix}_{kind}"]
    return [f"{prefix}_{kind}_{i}" for i in range(count)]


def apply_indicator(
    df: pd.DataFrame,
    config: IndicatorConfig,
    prefix: str | None = None,
) -> pd.DataFrame:
    """
    Apply an indicator config to an OHLCV DataFrame.

    The instance is seeded from the first row and every row (the first
    included) is advanced, see IndicatorConfig.over().

    Args:
        df: OHLCV DataFrame, oldest row first
        config: Indicator configuration
        prefix: Output column prefix (default: config NAME, lowercased)

    Returns:
        Copy of df with "{prefix}_value" and "{prefix}_signal" columns
        (suffixed with an index for multi-output indicators)

    Raises:
        InvalidConfigurationError: If the config does not validate
    """
    prefix = prefix or config.NAME.lower()
    n_values, n_signals = config.output_shape()
    value_cols = _column_names(prefix, "value", n_values)
    signal_cols = _column_names(prefix, "signal", n_signals)

    out = df.copy()
    results = config.over(candles_from_frame(df))
    if not results:
        for col in value_cols + signal_cols:
            out[col] = pd.Series(dtype=float)
        return out

    values = np.array([r.values for r in results], dtype=float)
    signals = np.array([r.signals for r in results], dtype=float)
    for i, col in enumerate(value_cols):
        out[col] = values[:, i]
    for i, col in enumerate(signal_cols):
        out[col] = signals[:, i]

    get_logger().debug(f"Applied {config.NAME} to {len(df)} bars -> {value_cols + signal_cols}")
    return out


def _money_flow(df: pd.DataFrame) -> pd.Series:
    hl_range = df["high"] - df["low"]
    clv = ((df["close"] - df["low"]) - (df["high"] - df["close"])) / hl_range.where(hl_range != 0)
    return clv.fillna(0.0) * df["volume"]


def vectorized_chaikin(
    df: pd.DataFrame,
    fast: int = 3,
    slow: int = 10,
    window: int = 0,
) -> pd.DataFrame:
    """
    Vectorized Chaikin Oscillator for the EMA family.

    Reproduces the streaming seeding rule: the AD index and both EMAs are
    seeded from the first bar, then every bar (the first included) is applied.

    Formula:
        mf = clv * volume
        adi = seed + cumsum(mf)                 (window == 0)
        adi = rolling_sum([seed] * window + mf)  (window > 0)
        oscillator = ema(adi, fast) - ema(adi, slow)

    Returns:
        DataFrame with "value" and "signal" columns, indexed like df
    """
    mf = _money_flow(df)
    if mf.empty:
        return pd.DataFrame({"value": [], "signal": []}, index=df.index, dtype=float)

    first = float(mf.iloc[0])
    if window == 0:
        seed = first
        adi = seed + mf.cumsum()
    else:
        seed = first * window
        padded = pd.concat([pd.Series([first] * window), mf.reset_index(drop=True)], ignore_index=True)
        adi = pd.Series(
            padded.rolling(window).sum().iloc[window:].to_numpy(),
            index=df.index,
        )

    # ewm(adjust=False) starts at its first input, so prepend the seed and drop it
    seeded = pd.concat([pd.Series([seed]), adi.reset_index(drop=True)], ignore_index=True)
    ema_fast = seeded.ewm(span=fast, adjust=False).mean().iloc[1:].to_numpy()
    ema_slow = seeded.ewm(span=slow, adjust=False).mean().iloc[1:].to_numpy()
    value = pd.Series(ema_fast - ema_slow, index=df.index)

    prev = value.shift(1).fillna(0.0)
    cross_above = ((prev <= 0.0) & (value > 0.0)).astype(float)
    cross_under = ((prev >= 0.0) & (value < 0.0)).astype(float)

    return pd.DataFrame({"value": value, "signal": cross_above - cross_under}, index=df.index)
