from __future__ import annotations

from dataclasses import dataclass

from tacore.indicator.config import IndicatorConfig
from tacore.indicator.instance import IndicatorInstance
from tacore.indicator.registry import register
from tacore.methods import MA, Cross, MAMethod
from tacore.types.aliases import Shape
from tacore.types.bar import OHLCV, Source
from tacore.types.result import IndicatorResult


@register
@dataclass
class MovingAverage(IndicatorConfig):
    """
    Moving average of a bar quantity.

    Raw values:  [0] moving average
    Signals:     [0] source crossing the moving average (BUY above, SELL below)
    """

    NAME = "ma"

    ma: MA = MA(MAMethod.EMA, 20)
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return isinstance(self.ma, MA) and self.ma.is_valid() and isinstance(self.source, Source)

    def size(self) -> Shape:
        return (1, 1)

    def _instantiate(self, seed: OHLCV) -> MovingAverageInstance:
        return MovingAverageInstance(self, seed)


class MovingAverageInstance(IndicatorInstance):
    def __init__(self, config: MovingAverage, seed: OHLCV) -> None:
        super().__init__(config)
        self._source = config.source
        value = self._source.of(seed)
        self._ma = config.ma.build(value)
        self._cross = Cross(value, value)

    def step(self, bar: OHLCV) -> IndicatorResult:
        value = self._source.of(bar)
        avg = self._ma.step(value)
        return IndicatorResult.of((avg,), (self._cross.step(value, avg),))
