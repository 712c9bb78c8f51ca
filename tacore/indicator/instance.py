from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

from tacore.types.aliases import Shape
from tacore.types.bar import OHLCV
from tacore.types.result import IndicatorResult

if TYPE_CHECKING:
    from tacore.indicator.config import IndicatorConfig


class IndicatorInstance(ABC):
    """
    Mutable per-stream state created by IndicatorConfig.init().

    Two states only: seeded (no step yet) and advancing. There is no terminal
    state. One instance serves exactly one stream; bars must arrive in order.
    """

    def __init__(self, config: IndicatorConfig) -> None:
        # Private snapshot; never handed out, so the shape cannot drift
        self._config = config

    @property
    def config(self) -> IndicatorConfig:
        return copy.deepcopy(self._config)

    @property
    def name(self) -> str:
        return self._config.NAME

    def size(self) -> Shape:
        return self._config.size()

    @abstractmethod
    def step(self, bar: OHLCV) -> IndicatorResult:
        """
        Advance by exactly one bar and return its result.
        Never raises for a finite bar; numeric corner cases map to fallback values.
        """

    def over(self, bars: Iterable[OHLCV]) -> list[IndicatorResult]:
        """Step through `bars` from the current state (no re-seeding)."""
        return [self.step(bar) for bar in bars]
