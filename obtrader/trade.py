"""Closed trades with derived profit and risk/reward."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Trade:
    """A completed trade; profit and risk/reward are derived on creation."""

    is_long: bool
    symbol: str
    entry_date: str
    entry_price: float
    exit_date: str
    exit_price: float
    stop_loss: float = 0.0
    take_profit: float = 0.0
    profit: float = field(init=False)
    risk_reward_ratio: float = field(init=False)

    def __post_init__(self) -> None:
        if self.is_long:
            self.profit = self.exit_price - self.entry_price
            risk = self.entry_price - self.stop_loss
        else:
            self.profit = self.entry_price - self.exit_price
            risk = self.stop_loss - self.entry_price
        self.risk_reward_ratio = self.profit / risk if risk > 0.0 else 0.0