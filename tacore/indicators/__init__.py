from tacore.indicators.conv import Conv
from tacore.indicators.ma import MovingAverage
from tacore.indicators.macd import MACD
from tacore.indicators.rsi import RSI

__all__ = [
    "Conv",
    "MACD",
    "MovingAverage",
    "RSI",
]
