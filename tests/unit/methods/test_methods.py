import pytest

from tacore.methods import EMA, MA, RMA, SMA, WMA, Cross, MAMethod
from tacore.types.result import Action


class TestMovingAverages:
    def test_sma_window_starts_filled_with_seed(self) -> None:
        sma = SMA(3, 1.0)
        assert [sma.step(v) for v in (1.0, 2.0, 3.0, 4.0)] == pytest.approx(
            [1.0, 4.0 / 3.0, 2.0, 3.0]
        )

    def test_ema_alpha(self) -> None:
        ema = EMA(3, 0.0)  # alpha = 0.5
        assert ema.step(4.0) == pytest.approx(2.0)
        assert ema.step(4.0) == pytest.approx(3.0)

    def test_rma_alpha(self) -> None:
        rma = RMA(4, 0.0)  # alpha = 0.25
        assert rma.step(4.0) == pytest.approx(1.0)
        assert rma.step(4.0) == pytest.approx(1.75)

    def test_wma_matches_direct_weighting(self) -> None:
        wma = WMA(3, 0.0)
        assert wma.step(3.0) == pytest.approx(1.5)  # [0, 0, 3]
        assert wma.step(6.0) == pytest.approx(4.0)  # [0, 3, 6]
        assert wma.step(9.0) == pytest.approx(7.0)  # [3, 6, 9]
        assert wma.step(0.0) == pytest.approx((6.0 + 18.0 + 0.0) / 6.0)  # [6, 9, 0]

    @pytest.mark.parametrize("cls", [SMA, EMA, RMA, WMA])
    def test_constant_input_is_fixed_point(self, cls: type) -> None:
        m = cls(5, 42.0)
        for _ in range(20):
            assert m.step(42.0) == pytest.approx(42.0)

    @pytest.mark.parametrize("cls", [SMA, EMA, RMA, WMA])
    def test_length_must_be_positive(self, cls: type) -> None:
        with pytest.raises(ValueError, match="length must be >= 1"):
            cls(0, 1.0)


class TestCross:
    def test_cross_up_and_down(self) -> None:
        cross = Cross(1.0, 1.0)
        assert cross.step(2.0, 1.0) is Action.BUY
        assert cross.step(3.0, 1.0) is Action.NONE
        assert cross.step(0.5, 1.0) is Action.SELL
        assert cross.step(0.4, 1.0) is Action.NONE

    def test_touch_is_not_a_cross(self) -> None:
        cross = Cross(0.0, 1.0)
        assert cross.step(1.0, 1.0) is Action.NONE
        assert cross.step(2.0, 1.0) is Action.BUY


class TestMA:
    def test_from_text(self) -> None:
        assert MA.from_text("ema-14") == MA(MAMethod.EMA, 14)
        assert MA.from_text(" WMA-3 ") == MA(MAMethod.WMA, 3)

    def test_str_roundtrip(self) -> None:
        ma = MA(MAMethod.RMA, 7)
        assert str(ma) == "rma-7"
        assert MA.from_text(str(ma)) == ma

    @pytest.mark.parametrize("text", ["ema", "ema-", "-14", "xyz-3", "ema-1.5", ""])
    def test_from_text_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            MA.from_text(text)

    def test_is_valid(self) -> None:
        assert MA(MAMethod.SMA, 1).is_valid()
        assert not MA(MAMethod.SMA, 0).is_valid()
        assert not MA(MAMethod.SMA, -3).is_valid()
        assert not MA(MAMethod.SMA, 70_000).is_valid()

    @pytest.mark.parametrize(
        "method,cls",
        [(MAMethod.SMA, SMA), (MAMethod.EMA, EMA), (MAMethod.RMA, RMA), (MAMethod.WMA, WMA)],
    )
    def test_build(self, method: MAMethod, cls: type) -> None:
        m = MA(method, 4).build(10.0)
        assert type(m) is cls
        assert m.length == 4
