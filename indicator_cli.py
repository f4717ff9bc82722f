#!/usr/bin/env python3
"""
Indicator CLI

Runs the Chaikin Oscillator over an OHLCV CSV file and prints the tail
of the result. This is a PURE SHELL - it only:
- Reads arguments and the CSV
- Calls src.indicators
- Prints results

Defaults come from the environment (.env): CHAIKIN_MA1, CHAIKIN_MA2,
CHAIKIN_WINDOW, LOG_LEVEL, LOG_DIR.
"""

import argparse
import sys

import pandas as pd
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.config.config import get_config
from src.indicators import (
    IndicatorError,
    apply_indicator,
    create_indicator,
)
from src.utils.logger import setup_logger


console = Console()


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for indicator_cli."""
    parser = argparse.ArgumentParser(
        description="Chaikin Oscillator over an OHLCV CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python indicator_cli.py bars.csv
  python indicator_cli.py bars.csv --ma1 "EMA(5)" --ma2 "EMA(20)"
  python indicator_cli.py bars.csv --ma1 "SMA(3)" --ma2 "SMA(10)" --window 20 --tail 50
        """
    )

    parser.add_argument("csv", help="CSV file with open, high, low, close, volume columns")
    parser.add_argument("--ma1", help="Short smoothing, e.g. EMA(3) (default: CHAIKIN_MA1)")
    parser.add_argument("--ma2", help="Long smoothing, e.g. EMA(10) (default: CHAIKIN_MA2)")
    parser.add_argument("--window", type=int, help="AD index window, 0 = windowless (default: CHAIKIN_WINDOW)")
    parser.add_argument("--time-column", default=None, help="Column to use as the timestamp index")
    parser.add_argument("--tail", type=int, default=20, help="Number of trailing rows to print (default: 20)")
    parser.add_argument("--signals-only", action="store_true", help="Print only rows with a non-zero signal")

    return parser.parse_args(argv)


def _load_frame(path: str, time_column: str | None) -> pd.DataFrame:
    df = pd.read_csv(path)
    df.columns = [c.lower() for c in df.columns]
    if time_column:
        df[time_column.lower()] = pd.to_datetime(df[time_column.lower()])
        df = df.set_index(time_column.lower())
    return df


def _render(result: pd.DataFrame, title: str) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Bar", justify="right", style="dim")
    table.add_column("Close", justify="right")
    table.add_column("Oscillator", justify="right")
    table.add_column("Signal", justify="center")

    for idx, row in result.iterrows():
        signal = row["chaikin_signal"]
        if signal > 0:
            label = "[bold green]BUY[/]"
        elif signal < 0:
            label = "[bold red]SELL[/]"
        else:
            label = "[dim]-[/]"
        table.add_row(str(idx), f"{row['close']:.4f}", f"{row['chaikin_value']:.4f}", label)

    return table


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns a process exit code."""
    args = parse_cli_args(argv)

    try:
        config = get_config()
    except OSError as e:
        console.print(Panel(str(e), title="[bold red]Configuration Error[/]", border_style="red"))
        return 1

    ok, errors = config.validate()
    if not ok:
        console.print(Panel("\n".join(errors), title="[bold red]Configuration Error[/]", border_style="red"))
        return 1

    logger = setup_logger(config.log.log_dir, config.log.level)

    params = {
        "ma1": args.ma1 or config.chaikin.ma1,
        "ma2": args.ma2 or config.chaikin.ma2,
        "window": args.window if args.window is not None else config.chaikin.window,
    }

    try:
        indicator = create_indicator("chaikin_oscillator", params)
        df = _load_frame(args.csv, args.time_column)
        result = apply_indicator(df, indicator, prefix="chaikin")
    except (IndicatorError, ValueError, KeyError, OSError) as e:
        logger.error(f"Indicator run failed: {e}")
        console.print(Panel(str(e), title="[bold red]Error[/]", border_style="red"))
        return 1

    for idx, row in result[result["chaikin_signal"] != 0].iterrows():
        logger.signal(indicator.NAME, row["chaikin_value"], row["chaikin_signal"], bar=idx)

    shown = result[result["chaikin_signal"] != 0] if args.signals_only else result
    title = f"{indicator.NAME} ma1={indicator.ma1} ma2={indicator.ma2} window={indicator.window}"
    console.print(_render(shown.tail(args.tail), title))
    return 0


if __name__ == "__main__":
    sys.exit(main())
