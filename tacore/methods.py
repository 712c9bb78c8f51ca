"""
Incremental building blocks for indicators.

Every method is seeded with one value and then advances one value per step in
O(1) time with bounded memory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque

from tacore.types.aliases import ValueType
from tacore.types.result import Action

MAX_PERIOD = 65_535


class Method(ABC):
    def __init__(self, length: int, seed: ValueType) -> None:
        if length < 1:
            raise ValueError(f"{type(self).__name__} length must be >= 1, got {length}")
        self.length = length

    @abstractmethod
    def step(self, value: ValueType) -> ValueType: ...


class SMA(Method):
    """Simple moving average over a rolling window (running sum)."""

    def __init__(self, length: int, seed: ValueType) -> None:
        super().__init__(length, seed)
        self._window: Deque[ValueType] = deque([seed] * length, maxlen=length)
        self._sum = seed * length

    def step(self, value: ValueType) -> ValueType:
        self._sum += value - self._window[0]
        self._window.append(value)
        return self._sum / self.length


class EMA(Method):
    """Exponential moving average, alpha = 2 / (length + 1)."""

    def __init__(self, length: int, seed: ValueType) -> None:
        super().__init__(length, seed)
        self._alpha = self._make_alpha(length)
        self._value = seed

    @staticmethod
    def _make_alpha(length: int) -> float:
        return 2.0 / (length + 1)

    def step(self, value: ValueType) -> ValueType:
        self._value += self._alpha * (value - self._value)
        return self._value


class RMA(EMA):
    """Wilder's running moving average, alpha = 1 / length."""

    @staticmethod
    def _make_alpha(length: int) -> float:
        return 1.0 / length


class WMA(Method):
    """Linearly weighted moving average (newest value has weight `length`)."""

    def __init__(self, length: int, seed: ValueType) -> None:
        super().__init__(length, seed)
        self._window: Deque[ValueType] = deque([seed] * length, maxlen=length)
        self._denom = length * (length + 1) / 2.0
        self._sum = seed * length
        self._weighted = seed * self._denom

    def step(self, value: ValueType) -> ValueType:
        # W' = W - S + n * v ; S' = S - oldest + v
        self._weighted += self.length * value - self._sum
        self._sum += value - self._window[0]
        self._window.append(value)
        return self._weighted / self._denom


class Cross:
    """
    Detects crossings of series `a` over series `b`.
    BUY when a moves above b, SELL when a moves below b, NONE otherwise.
    """

    def __init__(self, a: ValueType, b: ValueType) -> None:
        self._prev_a = a
        self._prev_b = b

    def step(self, a: ValueType, b: ValueType) -> Action:
        up = a > b and self._prev_a <= self._prev_b
        down = a < b and self._prev_a >= self._prev_b
        self._prev_a = a
        self._prev_b = b
        return Action.from_bool(up, down)


# --- Moving average selector ---


class MAMethod(str, Enum):
    SMA = "sma"
    EMA = "ema"
    RMA = "rma"
    WMA = "wma"


_METHODS: dict[MAMethod, type[Method]] = {
    MAMethod.SMA: SMA,
    MAMethod.EMA: EMA,
    MAMethod.RMA: RMA,
    MAMethod.WMA: WMA,
}


@dataclass(frozen=True, slots=True)
class MA:
    """
    Moving average selector: method plus period, written as "<method>-<period>".

    Example:
        >>> MA.from_text("ema-14")
        MA(method=<MAMethod.EMA: 'ema'>, period=14)
    """

    method: MAMethod = MAMethod.EMA
    period: int = 20

    @classmethod
    def from_text(cls, text: str) -> MA:
        method, sep, period = text.strip().lower().partition("-")
        if not sep:
            raise ValueError(f"Expected '<method>-<period>', got {text!r}")
        try:
            return cls(MAMethod(method), int(period))
        except ValueError as e:
            raise ValueError(f"Invalid moving average {text!r}: {e}") from e

    def __str__(self) -> str:
        return f"{self.method.value}-{self.period}"

    def is_valid(self) -> bool:
        return (
            isinstance(self.method, MAMethod)
            and isinstance(self.period, int)
            and 1 <= self.period <= MAX_PERIOD
        )

    def build(self, seed: ValueType) -> Method:
        return _METHODS[self.method](self.period, seed)
