"""Market structure: swing points, breaks of structure and changes of character."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from obtrader.candle import Candle


class StructureType(Enum):
    SWING_HIGH = "SwingHigh"
    SWING_LOW = "SwingLow"
    BREAK_OF_STRUCTURE = "BreakOfStructure"
    CHANGE_OF_CHARACTER = "ChangeOfCharacter"
    CHOCH = "CHoCH"
    BOS = "BOS"


@dataclass(frozen=True)
class StructurePoint:
    """A notable price at a given candle index."""

    date: str
    price: float
    type: StructureType
    index: int


def detect_swing_points(candles: Sequence[Candle], lookback: int = 2) -> list[StructurePoint]:
    """Find candles whose high (or low) is strictly beyond `lookback` neighbours on each side."""
    if lookback < 0:
        raise ValueError("lookback must not be negative")
    points: list[StructurePoint] = []
    for i in range(lookback, len(candles) - lookback):
        candle = candles[i]
        neighbours = [
            (candles[i - j], candles[i + j]) for j in range(1, lookback + 1)
        ]
        if all(candle.high > a.high and candle.high > b.high for a, b in neighbours):
            points.append(StructurePoint(candle.date, candle.high, StructureType.SWING_HIGH, i))
        elif all(candle.low < a.low and candle.low < b.low for a, b in neighbours):
            points.append(StructurePoint(candle.date, candle.low, StructureType.SWING_LOW, i))
    return points


def _breaks(candle: Candle, swing: StructurePoint) -> bool:
    if swing.type is StructureType.SWING_HIGH:
        return candle.close > swing.price
    if swing.type is StructureType.SWING_LOW:
        return candle.close < swing.price
    return False


def _reverses(candle: Candle, swing: StructurePoint) -> bool:
    if swing.type is StructureType.SWING_HIGH:
        return candle.close < swing.price
    if swing.type is StructureType.SWING_LOW:
        return candle.close > swing.price
    return False


def detect_bos(
    candles: Sequence[Candle], swing_points: Sequence[StructurePoint]
) -> list[StructurePoint]:
    """One BOS point per (candle, swing) pair where the close breaks the swing level."""
    return [
        StructurePoint(candle.date, candle.close, StructureType.BOS, i)
        for i, candle in enumerate(candles)
        if i > 0
        for swing in swing_points
        if _breaks(candle, swing)
    ]


def detect_choch(
    candles: Sequence[Candle], swing_points: Sequence[StructurePoint]
) -> list[StructurePoint]:
    """At most one CHoCH point per candle whose close reverses against any swing level."""
    return [
        StructurePoint(candle.date, candle.close, StructureType.CHOCH, i)
        for i, candle in enumerate(candles)
        if i > 0 and any(_reverses(candle, swing) for swing in swing_points)
    ]