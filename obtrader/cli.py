"""Command-line entry point: load settings, read candles and report order blocks."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass, field
from os import PathLike
from typing import Sequence, Union

from obtrader.candle import Candle
from obtrader.data_reader import DataReader, DataReaderError
from obtrader.market_structure import detect_bos, detect_choch, detect_swing_points
from obtrader.order_block import (
    ConfirmationType,
    ConfirmedOB,
    detect_order_blocks,
    filter_order_blocks_with_structure,
)

log = logging.getLogger(__name__)

DEFAULT_CONFIG = "../config/settings.json"
MIN_CANDLES = 50
_REQUIRED_FIELDS = ("csv_path", "data_source", "api_endpoint", "api_key")


class ConfigError(RuntimeError):
    """Raised when the settings file is missing or malformed."""


@dataclass
class Config:
    """Settings that select and locate the candle data."""

    csv_path: str
    data_source: str
    api_endpoint: str
    api_key: str = field(repr=False)


def load_config(path: Union[str, PathLike]) -> Config:
    """Load settings from a JSON file holding all required string fields."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError("Could not open config file.") from exc
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ConfigError(f"Invalid config file: {exc}") from exc
    if not isinstance(data, dict) or any(name not in data for name in _REQUIRED_FIELDS):
        raise ConfigError("Missing necessary fields in config file.")
    bad = [name for name in _REQUIRED_FIELDS if not isinstance(data[name], str)]
    if bad:
        raise ConfigError(f"Config fields must be strings: {', '.join(bad)}")
    return Config(**{name: data[name] for name in _REQUIRED_FIELDS})


def analyze(candles: Sequence[Candle]) -> list[ConfirmedOB]:
    """Detect and confirm order blocks, logging them with every candle's details."""
    if len(candles) < MIN_CANDLES:
        raise ValueError(f"Not enough data (less than {MIN_CANDLES} bars available).")

    order_blocks = detect_order_blocks(candles)
    by_date = {zone.date: (zone, direction) for zone, direction in order_blocks}

    swing_points = detect_swing_points(candles)
    choch = detect_choch(candles, swing_points)
    bos = detect_bos(candles, swing_points)
    confirmed = filter_order_blocks_with_structure(candles, order_blocks, choch, bos)

    log.info("\nConfirmed Order Blocks:")
    for ob in confirmed:
        log.info(
            "%s %s / %s Confirmed by %s on %s",
            ob.zone.date, ob.zone.top, ob.zone.bottom,
            "CHoCH" if ob.confirmation is ConfirmationType.CHOCH else "BOS",
            ob.confirmation_date,
        )

    log.info("\n--- Candle Data ---")
    for bar in candles:
        log.info(
            "Date: %s | Open: %s | High: %s | Low: %s | Close: %s | Body Size: %s | % Change: %s%%",
            bar.date, bar.open, bar.high, bar.low, bar.close, bar.body_size(), bar.change_percent,
        )
        if bar.date in by_date:
            zone, direction = by_date[bar.date]
            log.info(
                "  → %s Order Block detected at %s | Zone Top: %s | Zone Bottom: %s",
                direction, bar.date, zone.top, zone.bottom,
            )
        log.info("--------------------------------------------------")
    return confirmed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the full dataset analysis; returns the process exit code."""
    parser = argparse.ArgumentParser(description="Detect and confirm order blocks in candle data.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG, help="path of the settings JSON file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        log.error("%s", exc)
        return 1

    reader = DataReader(config.csv_path, config.data_source, config.api_endpoint, config.api_key)
    log.info("Running full dataset analysis...")
    try:
        analyze(reader.read_data())
    except (DataReaderError, ValueError) as exc:
        log.error("Error occurred: %s", exc)

    log.info("Program completed.")
    return 0