import polars as pl
import pytest

from tacore.helpers import RandomCandles, candles_from_frame, results_to_frame
from tacore.indicators import MACD
from tacore.types.bar import Candle, is_valid_bar
from tacore.types.result import Action, IndicatorResult


class TestRandomCandles:
    def test_deterministic_for_seed(self) -> None:
        assert RandomCandles(seed=3).take(50) == RandomCandles(seed=3).take(50)
        assert RandomCandles(seed=3).take(50) != RandomCandles(seed=4).take(50)

    def test_candles_are_valid_and_chained(self) -> None:
        candles = RandomCandles(seed=11, start_price=50.0).take(500)
        assert candles[0].open == 50.0
        assert all(is_valid_bar(c) for c in candles)
        for prev, cur in zip(candles, candles[1:]):
            assert cur.open == prev.close
            assert cur.start_ms == prev.start_ms + 60_000

    def test_rejects_non_positive_start(self) -> None:
        with pytest.raises(ValueError, match="start_price must be positive"):
            RandomCandles(start_price=0.0)


class TestFrames:
    def test_candles_from_frame(self) -> None:
        df = pl.DataFrame(
            {
                "start_ms": [0, 60_000],
                "open": [1.0, 2.0],
                "high": [2.0, 3.0],
                "low": [0.5, 1.5],
                "close": [2.0, 2.5],
                "volume": [10.0, 20.0],
            }
        )
        candles = candles_from_frame(df, symbol="BTCUSDT")
        assert candles == [
            Candle(1.0, 2.0, 0.5, 2.0, 10.0, symbol="BTCUSDT", start_ms=0),
            Candle(2.0, 3.0, 1.5, 2.5, 20.0, symbol="BTCUSDT", start_ms=60_000),
        ]

    def test_candles_from_frame_without_volume(self) -> None:
        df = pl.DataFrame({"open": [1], "high": [1], "low": [1], "close": [1]})
        assert candles_from_frame(df)[0].volume == 0.0

    def test_candles_from_frame_missing_columns(self) -> None:
        with pytest.raises(ValueError, match="missing columns"):
            candles_from_frame(pl.DataFrame({"close": [1.0]}))

    def test_results_to_frame(self, candles: list[Candle]) -> None:
        results = MACD().eval(candles)
        df = results_to_frame(results, "macd")
        assert df.columns == ["macd_v0", "macd_v1", "macd_s0"]
        assert df.height == len(candles)
        assert df.schema["macd_v0"] == pl.Float64
        assert df.schema["macd_s0"] == pl.Int8
        assert df["macd_v1"].to_list() == [r.value(1) for r in results]

    def test_results_to_frame_signals_as_ints(self) -> None:
        results = [IndicatorResult.of((1.0,), (Action.SELL,)), IndicatorResult.of((2.0,), (Action.BUY,))]
        df = results_to_frame(results, "x")
        assert df["x_s0"].to_list() == [-1, 1]

    def test_results_to_frame_empty(self) -> None:
        assert results_to_frame([], "x").is_empty()
