from typing import Callable

import pytest

from tacore.helpers import RandomCandles
from tacore.indicator.config import IndicatorConfig
from tacore.indicators import MACD, RSI, Conv, MovingAverage
from tacore.types.bar import Candle

# Every reference indicator with its default parameters
CONFIG_FACTORIES: dict[str, Callable[[], IndicatorConfig]] = {
    "ma": MovingAverage,
    "rsi": RSI,
    "macd": MACD,
    "conv": Conv,
}


@pytest.fixture
def candles() -> list[Candle]:
    return RandomCandles(seed=42).take(200)


@pytest.fixture(params=sorted(CONFIG_FACTORIES))
def config(request: pytest.FixtureRequest) -> IndicatorConfig:
    """Fresh default configuration of each reference indicator."""
    return CONFIG_FACTORIES[request.param]()


