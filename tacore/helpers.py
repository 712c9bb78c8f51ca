"""
Helpers around the protocol: synthetic candles and polars frame adapters.
"""

from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np
import polars as pl

from tacore.types.bar import Candle
from tacore.types.result import IndicatorResult

OHLCV_COLUMNS = ("open", "high", "low", "close", "volume")


class RandomCandles:
    """
    Endless, deterministic stream of valid candles (random walk on the close).

    Example:
        >>> candles = list(itertools.islice(RandomCandles(seed=7), 100))
    """

    def __init__(
        self,
        seed: int = 0,
        *,
        start_price: float = 100.0,
        volatility: float = 0.01,
        symbol: str = "RANDOM",
        start_ms: int = 0,
        step_ms: int = 60_000,
    ) -> None:
        if start_price <= 0:
            raise ValueError("start_price must be positive")
        self._rng = np.random.default_rng(seed)
        self._price = start_price
        self._volatility = volatility
        self._symbol = symbol
        self._ts = start_ms
        self._step_ms = step_ms

    def __iter__(self) -> Iterator[Candle]:
        return self

    def __next__(self) -> Candle:
        open_ = self._price
        close = open_ * float(np.exp(self._rng.normal(0.0, self._volatility)))
        wick_up, wick_down = self._rng.uniform(0.0, self._volatility, size=2)
        high = max(open_, close) * (1.0 + float(wick_up))
        low = min(open_, close) * (1.0 - float(wick_down))
        volume = float(self._rng.uniform(1.0, 1000.0))

        candle = Candle(
            open=open_,
            high=high,
            low=low,
            close=close,
            volume=volume,
            symbol=self._symbol,
            start_ms=self._ts,
        )
        self._price = close
        self._ts += self._step_ms
        return candle

    def take(self, n: int) -> list[Candle]:
        return [next(self) for _ in range(n)]


def candles_from_frame(df: pl.DataFrame, *, symbol: str | None = None) -> list[Candle]:
    """
    Convert a frame with open/high/low/close(/volume) columns into candles.
    An optional `start_ms` column is carried over.
    """
    missing = [c for c in OHLCV_COLUMNS[:4] if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame is missing columns: {missing}")

    has_volume = "volume" in df.columns
    has_ts = "start_ms" in df.columns
    candles: list[Candle] = []
    for row in df.iter_rows(named=True):
        candles.append(
            Candle(
                open=float(row["open"]),
                high=float(row["high"]),
                low=float(row["low"]),
                close=float(row["close"]),
                volume=float(row["volume"]) if has_volume else 0.0,
                symbol=symbol,
                start_ms=int(row["start_ms"]) if has_ts else None,
            )
        )
    return candles


def results_to_frame(results: Sequence[IndicatorResult], name: str) -> pl.DataFrame:
    """
    One row per result: `{name}_v{i}` Float64 columns, `{name}_s{i}` Int8 columns.
    """
    if not results:
        return pl.DataFrame()

    raw_count, signal_count = results[0].shape
    data: dict[str, pl.Series] = {}
    for i in range(raw_count):
        col = f"{name}_v{i}"
        data[col] = pl.Series(col, [r.values[i] for r in results], dtype=pl.Float64)
    for i in range(signal_count):
        col = f"{name}_s{i}"
        data[col] = pl.Series(col, [int(r.signals[i]) for r in results], dtype=pl.Int8)
    return pl.DataFrame(data)
