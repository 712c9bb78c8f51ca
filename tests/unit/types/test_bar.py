import math
from typing import NamedTuple

import pytest

from tacore.types.bar import OHLCV, Bar, Candle, Source, clv, hl2, is_valid_bar, ohlc4, tp, tr


class TupleBar(NamedTuple):
    open: float
    high: float
    low: float
    close: float
    volume: float


def test_derived_accessors() -> None:
    c = Candle(open=10.0, high=14.0, low=8.0, close=12.0, volume=5.0)
    assert tp(c) == pytest.approx((14.0 + 8.0 + 12.0) / 3)
    assert hl2(c) == pytest.approx(11.0)
    assert ohlc4(c) == pytest.approx(11.0)
    # ((12 - 8) - (14 - 12)) / 6
    assert clv(c) == pytest.approx(2.0 / 6.0)
    assert c.tp() == tp(c)
    assert c.hl2() == hl2(c)
    assert c.ohlc4() == ohlc4(c)
    assert c.clv() == clv(c)


def test_clv_without_range_is_zero() -> None:
    c = Candle(open=5.0, high=5.0, low=5.0, close=5.0)
    assert clv(c) == 0.0


def test_true_range_uses_previous_close() -> None:
    c = Candle(open=10.0, high=12.0, low=9.0, close=11.0)
    assert tr(c, 10.0) == pytest.approx(3.0)
    assert tr(c, 15.0) == pytest.approx(6.0)  # gap down
    assert tr(c, 7.0) == pytest.approx(5.0)  # gap up
    assert c.tr(15.0) == tr(c, 15.0)


@pytest.mark.parametrize(
    "bar,expected",
    [
        (Candle(open=10.0, high=12.0, low=9.0, close=11.0, volume=1.0), True),
        (Candle(open=10.0, high=10.5, low=9.0, close=11.0, volume=1.0), False),
        (Candle(open=10.0, high=12.0, low=10.5, close=11.0, volume=1.0), False),
        (Candle(open=10.0, high=12.0, low=9.0, close=11.0, volume=-1.0), False),
        (Candle(open=math.nan, high=12.0, low=9.0, close=11.0, volume=1.0), False),
        (Candle(open=10.0, high=math.inf, low=9.0, close=11.0, volume=1.0), False),
    ],
)
def test_is_valid_bar(bar: Candle, expected: bool) -> None:
    assert is_valid_bar(bar) is expected
    assert bar.is_valid() is expected


def test_bar_types_satisfy_protocol() -> None:
    assert isinstance(Candle(open=1.0, high=1.0, low=1.0, close=1.0), OHLCV)
    assert isinstance(Bar(1.0, 1.0, 1.0, 1.0), OHLCV)
    assert isinstance(TupleBar(1.0, 1.0, 1.0, 1.0, 0.0), OHLCV)
    assert not isinstance(object(), OHLCV)


def test_source_of_reads_requested_quantity() -> None:
    b = Bar(open=10.0, high=14.0, low=8.0, close=12.0, volume=3.0)
    assert Source.OPEN.of(b) == 10.0
    assert Source.HIGH.of(b) == 14.0
    assert Source.LOW.of(b) == 8.0
    assert Source.CLOSE.of(b) == 12.0
    assert Source.VOLUME.of(b) == 3.0
    assert Source.HL2.of(b) == hl2(b)
    assert Source.TP.of(b) == tp(b)
    assert Source.OHLC4.of(b) == ohlc4(b)


def test_candle_is_immutable() -> None:
    c = Candle(open=1.0, high=1.0, low=1.0, close=1.0)
    with pytest.raises(AttributeError):
        c.close = 2.0  # type: ignore[misc]
