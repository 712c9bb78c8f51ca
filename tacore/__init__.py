from tacore.errors.errors import (
    IndicatorError,
    InvalidConfigurationError,
    ParseFailureError,
    UnknownParameterError,
)
from tacore.indicator.config import IndicatorConfig
from tacore.indicator.instance import IndicatorInstance
from tacore.indicator.registry import available, build_config, register
from tacore.indicators import MACD, RSI, Conv, MovingAverage
from tacore.methods import MA, MAMethod
from tacore.types.bar import OHLCV, Bar, Candle, Source, clv, hl2, is_valid_bar, ohlc4, tp, tr
from tacore.types.result import Action, IndicatorResult

__all__ = [
    # Protocol
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorResult",
    "Action",
    # Bars
    "OHLCV",
    "Bar",
    "Candle",
    "Source",
    "clv",
    "hl2",
    "is_valid_bar",
    "ohlc4",
    "tp",
    "tr",
    # Registry
    "available",
    "build_config",
    "register",
    # Indicators
    "MA",
    "MAMethod",
    "Conv",
    "MACD",
    "MovingAverage",
    "RSI",
    # Errors
    "IndicatorError",
    "InvalidConfigurationError",
    "ParseFailureError",
    "UnknownParameterError",
]
