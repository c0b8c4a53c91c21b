"""Orders placed by a strategy and their lifecycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)


class OrderType(Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderStatus(Enum):
    PENDING = "PENDING"
    EXECUTED = "EXECUTED"
    CANCELLED = "CANCELLED"


class OrderStateError(RuntimeError):
    """Raised when an order is executed or cancelled while not pending."""


@dataclass
class Order:
    """An order with entry, stop-loss and take-profit levels."""

    type: OrderType
    entry_price: float
    date: str
    stop_loss: float
    take_profit: float
    status: OrderStatus = OrderStatus.PENDING

    def execute(self) -> None:
        """Mark a pending order as executed."""
        if self.status is not OrderStatus.PENDING:
            raise OrderStateError("Order cannot be executed because it is not pending.")
        self.status = OrderStatus.EXECUTED
        log.info("Order executed at price: %s", self.entry_price)

    def cancel(self) -> None:
        """Mark a pending order as cancelled."""
        if self.status is not OrderStatus.PENDING:
            raise OrderStateError(
                "Order cannot be cancelled because it is already executed or cancelled."
            )
        self.status = OrderStatus.CANCELLED
        log.info("Order cancelled.")