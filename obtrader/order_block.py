"""Order block detection and confirmation against market structure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from obtrader.candle import Candle
from obtrader.market_structure import StructurePoint, StructureType


class OBType(Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"


class ConfirmationType(Enum):
    NONE = "None"
    CHOCH = "CHoCH"
    BOS = "BOS"


@dataclass
class OBZone:
    """Price zone of an order block candle."""

    top: float
    bottom: float
    date: str
    type: OBType
    score: float = 0.0


@dataclass
class ConfirmedOB:
    """An order block confirmed by a structure point."""

    zone: OBZone
    direction: str
    confirmation: ConfirmationType
    confirmation_date: str


def is_strong_bullish_impulse(prev: Candle, curr: Candle) -> bool:
    """Both candles bullish and the second body larger than the first."""
    return (
        prev.is_bullish()
        and curr.is_bullish()
        and abs(curr.close - curr.open) > abs(prev.close - prev.open)
    )


def is_strong_bearish_impulse(prev: Candle, curr: Candle) -> bool:
    """Both candles bearish and the second body larger than the first."""
    return (
        prev.is_bearish()
        and curr.is_bearish()
        and abs(curr.open - curr.close) > abs(prev.open - prev.close)
    )


def _zone(ob: Candle, ob_type: OBType) -> OBZone:
    body = abs(ob.close - ob.open)
    span = ob.high - ob.low
    return OBZone(
        top=max(ob.high, ob.open),
        bottom=min(ob.low, ob.close),
        date=ob.date,
        type=ob_type,
        score=body / span if span > 0 else 0.0,
    )


def get_bullish_ob_zone(ob: Candle) -> OBZone:
    """Zone of a bullish order block candle, scored by body/range."""
    return _zone(ob, OBType.BULLISH)


def get_bearish_ob_zone(ob: Candle) -> OBZone:
    """Zone of a bearish order block candle, scored by body/range."""
    return _zone(ob, OBType.BEARISH)


def find_bullish_order_blocks(candles: Sequence[Candle]) -> list[OBZone]:
    """Bearish candles preceded by a strong bullish impulse of the two candles before."""
    return [
        get_bullish_ob_zone(ob)
        for c2, c1, ob in zip(candles, candles[1:], candles[2:])
        if ob.is_bearish() and is_strong_bullish_impulse(c1, c2)
    ]


def find_bearish_order_blocks(candles: Sequence[Candle]) -> list[OBZone]:
    """Bullish candles preceded by a strong bearish impulse of the two candles before."""
    return [
        get_bearish_ob_zone(ob)
        for c2, c1, ob in zip(candles, candles[1:], candles[2:])
        if ob.is_bullish() and is_strong_bearish_impulse(c1, c2)
    ]


def detect_order_blocks(candles: Sequence[Candle]) -> list[tuple[OBZone, str]]:
    """Order blocks followed by a strong impulse, paired with their direction name."""
    blocks: list[tuple[OBZone, str]] = []
    for ob, c1, c2 in zip(candles, candles[1:], candles[2:]):
        if ob.is_bearish() and is_strong_bullish_impulse(c1, c2):
            blocks.append((get_bullish_ob_zone(ob), "Bullish"))
        if ob.is_bullish() and is_strong_bearish_impulse(c1, c2):
            blocks.append((get_bearish_ob_zone(ob), "Bearish"))
    return blocks


def _confirms(zone: OBZone, point: StructurePoint, kind: StructureType) -> bool:
    if point.type is not kind or point.index <= 0:
        return False
    if zone.type is OBType.BULLISH:
        return point.price > zone.top
    return point.price < zone.bottom


def filter_order_blocks_with_structure(
    candles: Sequence[Candle],
    raw_obs: Iterable[tuple[OBZone, str]],
    choch: Sequence[StructurePoint],
    bos: Sequence[StructurePoint],
) -> list[ConfirmedOB]:
    """Keep order blocks confirmed by a CHoCH point, or failing that by a BOS point."""
    confirmed: list[ConfirmedOB] = []
    for zone, direction in raw_obs:
        point = next((p for p in choch if _confirms(zone, p, StructureType.CHOCH)), None)
        conf_type = ConfirmationType.CHOCH
        if point is None:
            point = next((p for p in bos if _confirms(zone, p, StructureType.BOS)), None)
            conf_type = ConfirmationType.BOS
        if point is not None:
            confirmed.append(
                ConfirmedOB(
                    zone=zone,
                    direction=direction,
                    confirmation=conf_type,
                    confirmation_date=candles[point.index].date,
                )
            )
    return confirmed