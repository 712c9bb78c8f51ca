"""
Bar capability set.

Anything exposing open/high/low/close/volume can be fed to an indicator. The
derived quantities are plain functions so they work for any bar type, not only
for the concrete classes defined here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from tacore.types.aliases import UnixMillis, ValueType


@runtime_checkable
class OHLCV(Protocol):
    """One time-ordered price/volume observation."""

    @property
    def open(self) -> ValueType: ...

    @property
    def high(self) -> ValueType: ...

    @property
    def low(self) -> ValueType: ...

    @property
    def close(self) -> ValueType: ...

    @property
    def volume(self) -> ValueType: ...


# --- Derived accessors ---


def tp(bar: OHLCV) -> ValueType:
    """Typical price: (high + low + close) / 3."""
    return (bar.high + bar.low + bar.close) / 3.0


def hl2(bar: OHLCV) -> ValueType:
    return (bar.high + bar.low) / 2.0


def ohlc4(bar: OHLCV) -> ValueType:
    return (bar.open + bar.high + bar.low + bar.close) / 4.0


def clv(bar: OHLCV) -> ValueType:
    """
    Close location value in [-1, 1]. A bar without range (high == low) maps to 0.0.
    """
    rng = bar.high - bar.low
    if rng == 0:
        return 0.0
    return ((bar.close - bar.low) - (bar.high - bar.close)) / rng


def tr(bar: OHLCV, prev_close: ValueType) -> ValueType:
    """True range against the previous close."""
    return max(bar.high, prev_close) - min(bar.low, prev_close)


def is_valid_bar(bar: OHLCV) -> bool:
    """
    Check the bar invariant: finite prices, non-negative volume and
    low <= min(open, close) <= max(open, close) <= high.

    Indicators never call this; it is a contract of the bar source.
    """
    fields = (bar.open, bar.high, bar.low, bar.close, bar.volume)
    if not all(math.isfinite(v) for v in fields):
        return False
    if bar.volume < 0:
        return False
    return bar.high >= max(bar.open, bar.close) and bar.low <= min(bar.open, bar.close)


class Source(str, Enum):
    """Which bar quantity an indicator consumes."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"
    HL2 = "hl2"
    TP = "tp"
    OHLC4 = "ohlc4"

    def of(self, bar: OHLCV) -> ValueType:
        if self is Source.HL2:
            return hl2(bar)
        if self is Source.TP:
            return tp(bar)
        if self is Source.OHLC4:
            return ohlc4(bar)
        return float(getattr(bar, self.value))


# --- Concrete bars ---


@dataclass(frozen=True, slots=True)
class Candle:
    open: ValueType
    high: ValueType
    low: ValueType
    close: ValueType
    volume: ValueType = 0.0
    symbol: Optional[str] = None  # e.g. "BTCUSDT"
    start_ms: Optional[UnixMillis] = None  # UTC ms

    def tp(self) -> ValueType:
        return tp(self)

    def hl2(self) -> ValueType:
        return hl2(self)

    def ohlc4(self) -> ValueType:
        return ohlc4(self)

    def clv(self) -> ValueType:
        return clv(self)

    def tr(self, prev_close: ValueType) -> ValueType:
        return tr(self, prev_close)

    def is_valid(self) -> bool:
        return is_valid_bar(self)


class Bar:  # minimal bar without metadata
    __slots__ = ("open", "high", "low", "close", "volume")

    def __init__(
        self, open: float, high: float, low: float, close: float, volume: float = 0.0
    ) -> None:
        self.open = open
        self.high = high
        self.low = low
        self.close = close
        self.volume = volume

    def __repr__(self) -> str:
        return (
            f"Bar(open={self.open}, high={self.high}, low={self.low}, "
            f"close={self.close}, volume={self.volume})"
        )
