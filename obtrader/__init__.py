"""Order block and market structure analysis for OHLC price data."""

__version__ = "1.0.0"

__all__ = [
    "candle",
    "trade",
    "order",
    "market_structure",
    "order_block",
    "strategy",
    "data_reader",
    "cli",
]