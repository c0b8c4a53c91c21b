"""Price candles (OHLC bars)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Candle:
    """One OHLC bar with volume, date label and percentage change."""

    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: int = 0
    date: str = ""
    change_percent: float = 0.0

    def is_bullish(self) -> bool:
        """True when the bar closed above its open."""
        return self.close > self.open

    def is_bearish(self) -> bool:
        """True when the bar closed below its open."""
        return self.open > self.close

    def body_size(self) -> float:
        """Absolute distance between open and close."""
        return abs(self.close - self.open)

    def candle_range(self) -> float:
        """Distance between high and low."""
        return self.high - self.low

    def upper_wick(self) -> float:
        """Distance from the top of the body to the high."""
        return self.high - self.close if self.is_bullish() else self.high - self.open

    def lower_wick(self) -> float:
        """Distance from the bottom of the body to the low."""
        return self.open - self.low if self.is_bullish() else self.close - self.low

    def __str__(self) -> str:
        return (
            f"Date: {self.date}, Open: {self.open:f}, High: {self.high:f}, "
            f"Low: {self.low:f}, Close: {self.close:f}, Volume: {self.volume}, "
            f"Change %: {self.change_percent:f}"
        )