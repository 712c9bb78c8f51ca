from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from tacore.indicator.config import IndicatorConfig
from tacore.indicator.instance import IndicatorInstance
from tacore.indicator.registry import register
from tacore.types.aliases import Shape
from tacore.types.bar import OHLCV, Source
from tacore.types.result import IndicatorResult

MAX_WEIGHTS = 1024


def _weight_total(weights: tuple[float, ...]) -> Optional[float]:
    """Sum of the weights, or None when it does not fit in a float."""
    try:
        total = math.fsum(weights)
    except OverflowError:
        return None
    return total if math.isfinite(total) else None


@register
@dataclass
class Conv(IndicatorConfig):
    """
    Convolution of the last len(weights) values with custom weights.
    weights[-1] applies to the newest value. Result is normalized by sum(weights).

    Raw values:  [0] weighted mean
    """

    NAME = "conv"

    weights: tuple[float, ...] = (1.0, 2.0, 3.0)
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        if not isinstance(self.weights, tuple) or not 1 <= len(self.weights) <= MAX_WEIGHTS:
            return False
        if not all(isinstance(w, (int, float)) and math.isfinite(w) for w in self.weights):
            return False
        total = _weight_total(self.weights)
        return total is not None and total != 0 and isinstance(self.source, Source)

    def size(self) -> Shape:
        return (1, 0)

    def _instantiate(self, seed: OHLCV) -> ConvInstance:
        return ConvInstance(self, seed)


class ConvInstance(IndicatorInstance):
    def __init__(self, config: Conv, seed: OHLCV) -> None:
        super().__init__(config)
        self._source = config.source
        self._weights = config.weights
        self._total = math.fsum(config.weights)  # finite, checked by validate()
        n = len(config.weights)
        self._window: Deque[float] = deque([self._source.of(seed)] * n, maxlen=n)

    def step(self, bar: OHLCV) -> IndicatorResult:
        self._window.append(self._source.of(bar))
        acc = sum(w * x for w, x in zip(self._weights, self._window))
        return IndicatorResult.of((acc / self._total,))
