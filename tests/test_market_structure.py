import pytest

from obtrader.candle import Candle
from obtrader.market_structure import (
    StructurePoint,
    StructureType,
    detect_bos,
    detect_choch,
    detect_swing_points,
)


def bars(rows):
    return [
        Candle(open=close, high=high, low=low, close=close, date=f"d{i}")
        for i, (high, low, close) in enumerate(rows)
    ]


PEAK = bars([(1.0, 0.5, 0.8), (2.0, 1.0, 1.5), (5.0, 4.0, 4.5), (2.0, 1.0, 1.5), (1.0, 0.5, 0.8)])
VALLEY = bars([(9.0, 8.0, 8.5), (8.0, 7.0, 7.5), (6.0, 2.0, 3.0), (8.0, 7.0, 7.5), (9.0, 8.0, 8.5)])


def test_swing_high_detected():
    points = detect_swing_points(PEAK)
    assert points == [StructurePoint("d2", 5.0, StructureType.SWING_HIGH, 2)]


def test_swing_low_detected():
    points = detect_swing_points(VALLEY)
    assert points == [StructurePoint("d2", 2.0, StructureType.SWING_LOW, 2)]


def test_too_few_candles_gives_no_points():
    assert detect_swing_points(PEAK[:3]) == []
    assert detect_swing_points([]) == []


def test_equal_highs_are_not_swings():
    flat = bars([(3.0, 1.0, 2.0)] * 6)
    assert detect_swing_points(flat) == []


def test_zero_lookback_marks_every_candle_as_swing_high():
    points = detect_swing_points(PEAK, lookback=0)
    assert len(points) == len(PEAK)
    assert all(p.type is StructureType.SWING_HIGH for p in points)


def test_negative_lookback_rejected():
    with pytest.raises(ValueError):
        detect_swing_points(PEAK, lookback=-1)


def test_lookback_one_on_peak():
    points = detect_swing_points(PEAK, lookback=1)
    assert [p.index for p in points] == [2]


def test_bos_above_swing_high():
    swing = [StructurePoint("d0", 2.0, StructureType.SWING_HIGH, 0)]
    candles = bars([(3.0, 1.0, 2.5), (3.0, 1.0, 1.5), (4.0, 2.0, 3.0)])
    points = detect_bos(candles, swing)
    assert [p.index for p in points] == [2]
    assert points[0].price == candles[2].close
    assert points[0].type is StructureType.BOS


def test_bos_skips_first_candle_and_repeats_per_swing():
    swings = [
        StructurePoint("a", 1.0, StructureType.SWING_HIGH, 0),
        StructurePoint("b", 10.0, StructureType.SWING_LOW, 0),
    ]
    candles = bars([(6.0, 4.0, 5.0), (6.0, 4.0, 5.0)])
    points = detect_bos(candles, swings)
    assert [p.index for p in points] == [1, 1]


def test_choch_once_per_candle():
    swings = [
        StructurePoint("a", 10.0, StructureType.SWING_HIGH, 0),
        StructurePoint("b", 1.0, StructureType.SWING_LOW, 0),
    ]
    candles = bars([(6.0, 4.0, 5.0), (6.0, 4.0, 5.0), (12.0, 10.0, 11.0)])
    points = detect_choch(candles, swings)
    assert [p.index for p in points] == [1, 2]
    assert all(p.type is StructureType.CHOCH for p in points)
    assert [p.date for p in points] == ["d1", "d2"]


def test_no_swings_means_no_structure():
    assert detect_bos(PEAK, []) == []
    assert detect_choch(PEAK, []) == []


def test_structure_on_detected_swings_stays_in_range():
    swings = detect_swing_points(PEAK + VALLEY)
    for point in detect_bos(PEAK + VALLEY, swings) + detect_choch(PEAK + VALLEY, swings):
        assert 1 <= point.index < len(PEAK + VALLEY)