# obtrader

`obtrader` finds order blocks in OHLC price data and confirms them against
market structure. It finds swing highs and lows, breaks of structure (BOS) and
changes of character (CHoCH).

It reads candles from a CSV export or from a JSON time-series API. It logs the
order blocks it detects and the ones that structure confirms. It can also
turn order blocks into buy and sell orders with stop-loss and take-profit
levels.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The `obtrader` command reads a JSON settings file and analyses the whole
dataset. By default it reads `../config/settings.json`. You can give another
path as the only argument:

```
obtrader path/to/settings.json
```

To see the options it accepts:

```
obtrader --help
```

The settings file must contain all four of these fields, and each must be a
string:

```json
{
    "csv_path": "data/prices.csv",
    "data_source": "CSV",
    "api_endpoint": "https://api.example.com/query?function=TIME_SERIES_INTRADAY&symbol=ABC&interval=5min",
    "api_key": "placeholder"
}
```

* `data_source` is `"CSV"` or `"API"`. Any other value is reported as an error.
* For `"API"`, the reader adds `&apikey=<api_key>` to `api_endpoint` and
  fetches it over HTTP. The call must answer with status 200.
* The response must be a JSON object. One of its keys must contain
  `Time Series`, and that key must map timestamps to objects. Each object
  holds the string fields `"1. open"`, `"2. high"`, `"3. low"` and
  `"4. close"`.
* For API data, the percentage change of each candle is worked out from its
  open and close. The candles are sorted by timestamp, oldest first.

The analysis needs at least 50 candles. It logs these in turn:

1. the confirmed order blocks, each with its zone, its confirmation type
   (CHoCH or BOS) and the confirmation date;
2. every candle, with any order block detected on it.

Exit status:

* `1` when the settings file cannot be opened, is not valid JSON, or lacks a
  required string field.
* `0` otherwise. If the data cannot be loaded or there are too few candles,
  the error is logged but the status is still `0`.

## CSV format

The first line is a header. Each following line has these fields:

```
Date,Open,High,Low,Close,Change,Change %
```

The `Change` column is read past but not used.

Rows are expected newest first. They are reversed on loading, so candles come
out oldest first. These lines are skipped:

* blank lines;
* lines that contain the word `Date`;
* lines with a missing or non-numeric price or `Change %` field.

## Library use

```python
from obtrader.data_reader import DataReader
from obtrader.market_structure import detect_swing_points, detect_bos, detect_choch
from obtrader.order_block import detect_order_blocks, filter_order_blocks_with_structure
from obtrader.strategy import Strategy

candles = DataReader("data/prices.csv", "CSV").read_data()

swings = detect_swing_points(candles, 2)
choch = detect_choch(candles, swings)
bos = detect_bos(candles, swings)

raw = detect_order_blocks(candles)
for confirmed in filter_order_blocks_with_structure(candles, raw, choch, bos):
    print(confirmed.zone.date, confirmed.direction, confirmed.confirmation, confirmed.confirmation_date)

strategy = Strategy(candles, choch, bos)
strategy.run()
for order in strategy.orders:
    print(order.type, order.entry_price, order.stop_loss, order.take_profit)
```

### Modules

* `obtrader.candle`: `Candle`, with `is_bullish()`, `is_bearish()`,
  `body_size()`, `candle_range()`, `upper_wick()` and `lower_wick()`.
* `obtrader.market_structure`: `StructureType`, `StructurePoint`,
  `detect_swing_points()`, `detect_bos()` and `detect_choch()`.
* `obtrader.order_block`:
  * the types `OBType`, `ConfirmationType`, `OBZone` and `ConfirmedOB`;
  * the impulse tests `is_strong_bullish_impulse()` and
    `is_strong_bearish_impulse()`;
  * the zone builders `get_bullish_ob_zone()` and `get_bearish_ob_zone()`;
  * the finders `find_bullish_order_blocks()`, `find_bearish_order_blocks()`
    and `detect_order_blocks()`;
  * `filter_order_blocks_with_structure()`.
* `obtrader.order`: `Order`, `OrderType`, `OrderStatus` and `OrderStateError`.
* `obtrader.trade`: `Trade`, a closed trade. It works out `profit` and
  `risk_reward_ratio` from its entry, exit and stop-loss.
* `obtrader.strategy`: `Strategy`. `run()` fills `orders` and `confirmed`.
* `obtrader.data_reader`:
  * `DataReader` and `DataReaderError`;
  * the CSV functions `read_csv()` and `parse_csv()`;
  * the API functions `fetch_api()` and `parse_api_response()`.
* `obtrader.cli`: `Config`, `ConfigError`, `load_config()`, `analyze()` and
  `main()`.

### How detection works

* **Swing point:** a candle whose high is strictly above the highs of the
  `lookback` candles on each side is a swing high. Otherwise, a candle whose
  low is strictly below the lows of those candles is a swing low. The default
  `lookback` is 2.
* **BOS:** `detect_bos` records one point for every pair of candle and swing
  whose close breaks the swing level. A close above a swing high or below a
  swing low counts. The first candle is never checked.
* **CHoCH:** `detect_choch` records at most one point per candle. It does so
  when the candle's close is below any swing high or above any swing low. The
  first candle is never checked.
* **Bullish order block:** a bearish candle followed by two bullish candles,
  where the second body is larger than the first.
* **Bearish order block:** the mirror case of a bullish order block.
* **Zone:**
  * The zone spans from the higher of high and open down to the lower of low
    and close.
  * Its score is body size divided by range, or 0 when the range is 0.
* **Confirmation:** an order block is confirmed by the first CHoCH point
  beyond the zone. A point is beyond it when its price is above the top of a
  bullish zone or below the bottom of a bearish one. Failing that, the first
  BOS point beyond the zone confirms it.

### Orders

`Strategy.run()` makes one order for each detected order block:

* **Buy order,** for a bullish block: entry at the zone top and stop-loss at
  the zone bottom. Take-profit is the top plus twice the zone height.
* **Sell order,** for a bearish block: entry at the zone bottom and stop-loss
  at the zone top. Take-profit is the bottom minus twice the zone height.

`Order` objects start out pending. Only a pending order can be executed or
cancelled. Trying it on any other order raises `OrderStateError`.

### Errors

* `DataReader.read_data()` and `read_csv()` raise `DataReaderError` in these
  cases:
  * the file cannot be opened;
  * the data source is unknown;
  * the HTTP request fails;
  * the API response cannot be parsed.
* `analyze()` raises `ValueError` when it is given fewer than 50 candles.
* `load_config()` raises `ConfigError`.

## What it does not do

* It does not backtest. Orders are generated but never filled against later
  candles.
* It does not send orders to any broker or exchange.
* It does not store results. Everything goes to the log.