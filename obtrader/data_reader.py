"""Loading candles from CSV exports or a time-series JSON API."""

from __future__ import annotations

import json
import logging
import math
import re
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from obtrader.candle import Candle

log = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


class DataReaderError(RuntimeError):
    """Raised when candle data cannot be loaded or parsed."""


def _to_float(text: str) -> float:
    """Parse the leading number of `text`, ignoring anything after it."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    token = match.group(1)
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        raise ValueError(f"number out of range: {token!r}")
    return value


def _percent_change(open_price: float, close_price: float) -> float:
    diff = close_price - open_price
    if open_price:
        return diff / open_price * 100.0
    if diff == 0 or math.isnan(diff):
        return math.nan
    return math.copysign(math.inf, diff)


def _parse_csv_line(line: str) -> Candle | None:
    parts = line.split(",", 6)
    parts += [""] * (7 - len(parts))
    date, open_s, high_s, low_s, close_s, _change, percent_s = parts
    if not all((open_s, high_s, low_s, close_s, percent_s)):
        log.warning("Skipping line due to missing fields: %s", line)
        return None
    try:
        return Candle(
            open=_to_float(open_s.strip()),
            high=_to_float(high_s.strip()),
            low=_to_float(low_s.strip()),
            close=_to_float(close_s.strip()),
            date=date,
            change_percent=_to_float(percent_s.strip()),
        )
    except ValueError as exc:
        log.warning("Conversion error on line: %s\n  Reason: %s", line, exc)
        return None


def parse_csv(text: str) -> list[Candle]:
    """Parse a newest-first CSV export (with a header line) into oldest-first candles."""
    lines = [line for line in text.split("\n")[1:] if line]
    candles = [
        candle
        for line in reversed(lines)
        if "Date" not in line
        for candle in (_parse_csv_line(line),)
        if candle is not None
    ]
    log.info("Loaded %d candles from CSV.", len(candles))
    return candles


def read_csv(path: Union[str, PathLike]) -> list[Candle]:
    """Read and parse a CSV file of candles."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise DataReaderError(f"Error opening file: {path}") from exc
    return parse_csv(text)


def _price(values: dict, key: str) -> float:
    raw = values[key]
    if not isinstance(raw, str):
        raise TypeError(f"{key!r} is not a string")
    return _to_float(raw)


def parse_api_response(text: str) -> list[Candle]:
    """Parse a JSON time-series response into candles sorted oldest first."""
    try:
        document = json.loads(text)
        if not isinstance(document, dict):
            raise TypeError("response is not a JSON object")
        series_key = next((key for key in document if "Time Series" in key), None)
        if series_key is None:
            raise DataReaderError("Could not find time series data in API response.")
        series = document[series_key]
        if not isinstance(series, dict):
            raise TypeError("time series is not a JSON object")
        candles = []
        for timestamp, values in series.items():
            open_price = _price(values, "1. open")
            close_price = _price(values, "4. close")
            candles.append(
                Candle(
                    open=open_price,
                    high=_price(values, "2. high"),
                    low=_price(values, "3. low"),
                    close=close_price,
                    date=timestamp,
                    change_percent=_percent_change(open_price, close_price),
                )
            )
    except DataReaderError:
        raise
    except (ValueError, TypeError, KeyError) as exc:
        raise DataReaderError(f"Error parsing API response: {exc}") from exc
    candles.sort(key=lambda candle: candle.date)
    return candles


def fetch_api(endpoint: str, api_key: str) -> str:
    """Fetch the API response body, appending the key to the endpoint URL."""
    url = f"{endpoint}&apikey={api_key}"
    try:
        with urllib.request.urlopen(url) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise DataReaderError(f"API call failed with HTTP code: {exc.code}") from exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise DataReaderError(f"Request failed: {exc}") from exc
    if status != 200:
        raise DataReaderError(f"API call failed with HTTP code: {status}")
    return body.decode("utf-8", errors="replace")


@dataclass
class DataReader:
    """Reads candles from a CSV file or an HTTP API, chosen by `data_source`."""

    filepath: str
    data_source: str
    api_endpoint: str = ""
    api_key: str = field(default="", repr=False)

    def read_data(self) -> list[Candle]:
        """Load candles from the configured source ("CSV" or "API")."""
        if self.data_source == "CSV":
            return read_csv(self.filepath)
        if self.data_source == "API":
            return parse_api_response(fetch_api(self.api_endpoint, self.api_key))
        raise DataReaderError(f"Invalid data source: {self.data_source}")