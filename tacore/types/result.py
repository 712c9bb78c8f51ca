from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from tacore.types.aliases import Shape, ValueType


class Action(int, Enum):
    """Discrete signal emitted by an indicator."""

    SELL = -1
    NONE = 0
    BUY = 1

    @classmethod
    def from_bool(cls, buy: bool, sell: bool) -> Action:
        if buy and not sell:
            return cls.BUY
        if sell and not buy:
            return cls.SELL
        return cls.NONE


@dataclass(frozen=True, slots=True)
class IndicatorResult:
    """
    Per-step output: `raw_count` numeric values plus `signal_count` signals.

    A value, not a view: nothing here aliases the instance state that produced it.
    """

    values: tuple[ValueType, ...] = ()
    signals: tuple[Action, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (lists from indicator code) but store tuples
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))
        object.__setattr__(self, "signals", tuple(Action(s) for s in self.signals))

    @classmethod
    def of(cls, values: Iterable[ValueType], signals: Iterable[Action] = ()) -> IndicatorResult:
        return cls(values=tuple(values), signals=tuple(signals))

    @property
    def shape(self) -> Shape:
        return (len(self.values), len(self.signals))

    def value(self, index: int) -> ValueType:
        if not 0 <= index < len(self.values):
            raise IndexError(f"raw value index {index} out of range for shape {self.shape}")
        return self.values[index]

    def signal(self, index: int) -> Action:
        if not 0 <= index < len(self.signals):
            raise IndexError(f"signal index {index} out of range for shape {self.shape}")
        return self.signals[index]
