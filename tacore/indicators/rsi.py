from __future__ import annotations

import math
from dataclasses import dataclass

from tacore.indicator.config import IndicatorConfig
from tacore.indicator.instance import IndicatorInstance
from tacore.indicator.registry import register
from tacore.methods import MAX_PERIOD, RMA
from tacore.types.aliases import Shape
from tacore.types.bar import OHLCV, Source
from tacore.types.result import Action, IndicatorResult

NEUTRAL = 50.0  # reported when price has not moved at all


@register
@dataclass
class RSI(IndicatorConfig):
    """
    Relative Strength Index with Wilder smoothing.

    Raw values:  [0] RSI in [0, 100]
    Signals:     [0] BUY when RSI rises back above 100 * zone,
                     SELL when it falls back below 100 * (1 - zone)
    """

    NAME = "rsi"

    period: int = 14
    zone: float = 0.3
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return (
            isinstance(self.period, int)
            and 2 <= self.period <= MAX_PERIOD
            and isinstance(self.zone, (int, float))
            and math.isfinite(self.zone)
            and 0.0 <= self.zone < 0.5
            and isinstance(self.source, Source)
        )

    def size(self) -> Shape:
        return (1, 1)

    def _instantiate(self, seed: OHLCV) -> RSIInstance:
        return RSIInstance(self, seed)


class RSIInstance(IndicatorInstance):
    def __init__(self, config: RSI, seed: OHLCV) -> None:
        super().__init__(config)
        self._source = config.source
        self._lower = 100.0 * config.zone
        self._upper = 100.0 * (1.0 - config.zone)
        self._prev_value = self._source.of(seed)
        self._prev_rsi = NEUTRAL
        self._gain = RMA(config.period, 0.0)
        self._loss = RMA(config.period, 0.0)

    def step(self, bar: OHLCV) -> IndicatorResult:
        value = self._source.of(bar)
        change = value - self._prev_value
        self._prev_value = value

        gain = self._gain.step(max(change, 0.0))
        loss = self._loss.step(max(-change, 0.0))
        total = gain + loss
        rsi = NEUTRAL if total == 0 else 100.0 * gain / total

        buy = self._prev_rsi < self._lower <= rsi
        sell = self._prev_rsi > self._upper >= rsi
        self._prev_rsi = rsi
        return IndicatorResult.of((rsi,), (Action.from_bool(buy, sell),))
