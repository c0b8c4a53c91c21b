"""Order-block strategy that turns detected blocks into orders."""

from __future__ import annotations

import logging
from typing import Sequence

from obtrader.candle import Candle
from obtrader.market_structure import StructurePoint
from obtrader.order import Order, OrderType
from obtrader.order_block import (
    ConfirmedOB,
    OBType,
    OBZone,
    detect_order_blocks,
    filter_order_blocks_with_structure,
)

log = logging.getLogger(__name__)


class Strategy:
    """Generates orders from order blocks and confirms them with structure points."""

    def __init__(
        self,
        candles: Sequence[Candle],
        choch: Sequence[StructurePoint],
        bos: Sequence[StructurePoint],
    ) -> None:
        self.candles = list(candles)
        self.choch = list(choch)
        self.bos = list(bos)
        self.orders: list[Order] = []
        self.confirmed: list[ConfirmedOB] = []

    def run(self) -> None:
        """Generate orders for every order block, then confirm the blocks."""
        self._detect_and_generate_orders()
        self._confirm_and_filter_order_blocks()

    def _detect_and_generate_orders(self) -> None:
        for zone, direction in detect_order_blocks(self.candles):
            log.info(
                "Detected Order Block: %s at %s | Zone Top: %s | Zone Bottom: %s",
                direction, zone.date, zone.top, zone.bottom,
            )
            if direction == "Bullish":
                self._generate_buy_order(zone)
            elif direction == "Bearish":
                self._generate_sell_order(zone)

    def _generate_buy_order(self, ob: OBZone) -> None:
        take_profit = ob.top + (ob.top - ob.bottom) * 2
        stop_loss = ob.bottom
        self.orders.append(Order(OrderType.BUY, ob.top, ob.date, stop_loss, take_profit))
        log.info(
            "Generated Buy Order at %s on %s | Stop Loss: %s | Take Profit: %s",
            ob.top, ob.date, stop_loss, take_profit,
        )

    def _generate_sell_order(self, ob: OBZone) -> None:
        take_profit = ob.bottom - (ob.top - ob.bottom) * 2
        stop_loss = ob.top
        self.orders.append(Order(OrderType.SELL, ob.bottom, ob.date, stop_loss, take_profit))
        log.info(
            "Generated Sell Order at %s on %s | Stop Loss: %s | Take Profit: %s",
            ob.bottom, ob.date, stop_loss, take_profit,
        )

    def _confirm_and_filter_order_blocks(self) -> None:
        self.confirmed = filter_order_blocks_with_structure(
            self.candles, detect_order_blocks(self.candles), self.choch, self.bos
        )
        for ob in self.confirmed:
            log.info(
                "Confirmed %s OB at %s with confirmation on %s",
                "Bullish" if ob.zone.type is OBType.BULLISH else "Bearish",
                ob.zone.top, ob.confirmation_date,
            )