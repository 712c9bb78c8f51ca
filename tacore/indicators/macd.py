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
class MACD(IndicatorConfig):
    """
    Moving Average Convergence Divergence.

    Raw values:  [0] macd = ma1 - ma2, [1] signal line = signal(macd)
    Signals:     [0] macd crossing its signal line
    """

    NAME = "macd"

    ma1: MA = MA(MAMethod.EMA, 12)
    ma2: MA = MA(MAMethod.EMA, 26)
    signal: MA = MA(MAMethod.EMA, 9)
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        mas = (self.ma1, self.ma2, self.signal)
        if not all(isinstance(m, MA) and m.is_valid() for m in mas):
            return False
        return self.ma1.period < self.ma2.period and isinstance(self.source, Source)

    def size(self) -> Shape:
        return (2, 1)

    def _instantiate(self, seed: OHLCV) -> MACDInstance:
        return MACDInstance(self, seed)


class MACDInstance(IndicatorInstance):
    def __init__(self, config: MACD, seed: OHLCV) -> None:
        super().__init__(config)
        self._source = config.source
        value = self._source.of(seed)
        self._ma1 = config.ma1.build(value)
        self._ma2 = config.ma2.build(value)
        # Both averages start at the seed, so the seeded macd is 0
        self._signal = config.signal.build(0.0)
        self._cross = Cross(0.0, 0.0)

    def step(self, bar: OHLCV) -> IndicatorResult:
        value = self._source.of(bar)
        macd = self._ma1.step(value) - self._ma2.step(value)
        sigline = self._signal.step(macd)
        return IndicatorResult.of((macd, sigline), (self._cross.step(macd, sigline),))
