import json
import logging

import pytest

from obtrader.candle import Candle
from obtrader.cli import Config, ConfigError, analyze, load_config, main
from obtrader.market_structure import detect_bos, detect_choch, detect_swing_points
from obtrader.order_block import (
    ConfirmationType,
    detect_order_blocks,
    filter_order_blocks_with_structure,
)

HEADER = "Date,Open,High,Low,Close,Change,Change %"


def _make_candles(cycles: int = 20) -> list[Candle]:
    candles = []
    for k in range(cycles):
        base = 100.0 + 20.0 * (k % 2)
        shapes = [
            (base + 5, base + 6, base - 1, base),
            (base, base + 3, base - 0.5, base + 2),
            (base + 2, base + 9, base + 1, base + 8),
        ]
        for n, (o, h, l, c) in enumerate(shapes):
            candles.append(Candle(open=o, high=h, low=l, close=c, date=f"2024-{k + 1:02d}-{n + 1:02d}"))
    return candles


def _write_csv(path, candles):
    rows = [
        f"{c.date},{c.open},{c.high},{c.low},{c.close},0,{c.change_percent}"
        for c in reversed(candles)
    ]
    path.write_text(HEADER + "\n" + "\n".join(rows) + "\n", encoding="utf-8")


def _write_config(path, csv_path, data_source="CSV"):
    path.write_text(
        json.dumps(
            {
                "csv_path": str(csv_path),
                "data_source": data_source,
                "api_endpoint": "https://api.example.com/query?x=1",
                "api_key": "placeholder",
            }
        ),
        encoding="utf-8",
    )


def test_load_config_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    _write_config(path, "data.csv")
    config = load_config(path)
    assert config == Config("data.csv", "CSV", "https://api.example.com/query?x=1", "placeholder")


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Could not open"):
        load_config(tmp_path / "nope.json")


def test_load_config_missing_field(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"csv_path": "a", "data_source": "CSV"}), encoding="utf-8")
    with pytest.raises(ConfigError, match="Missing necessary fields"):
        load_config(path)


def test_load_config_non_string_field(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"csv_path": 1, "data_source": "CSV", "api_endpoint": "", "api_key": "placeholder"}),
        encoding="utf-8",
    )
    with pytest.raises(ConfigError):
        load_config(path)


def test_analyze_requires_fifty_candles():
    with pytest.raises(ValueError, match="Not enough data"):
        analyze(_make_candles()[:49])


def test_analyze_matches_structure_pipeline():
    candles = _make_candles()
    swings = detect_swing_points(candles)
    expected = filter_order_blocks_with_structure(
        candles, detect_order_blocks(candles), detect_choch(candles, swings), detect_bos(candles, swings)
    )
    result = analyze(candles)
    assert result == expected
    assert len(result) > 0
    dates = {c.date for c in candles}
    for ob in result:
        assert ob.zone.date in dates
        assert ob.confirmation_date in dates
        assert ob.confirmation in (ConfirmationType.CHOCH, ConfirmationType.BOS)


def test_main_missing_config_returns_one(tmp_path):
    assert main([str(tmp_path / "nope.json")]) == 1


def test_main_runs_analysis(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    csv_path = tmp_path / "prices.csv"
    _write_csv(csv_path, _make_candles())
    config_path = tmp_path / "settings.json"
    _write_config(config_path, csv_path)
    assert main([str(config_path)]) == 0
    assert "Confirmed by" in caplog.text
    assert "Program completed." in caplog.text


def test_main_too_little_data_still_completes(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    csv_path = tmp_path / "prices.csv"
    _write_csv(csv_path, _make_candles()[:10])
    config_path = tmp_path / "settings.json"
    _write_config(config_path, csv_path)
    assert main([str(config_path)]) == 0
    assert "Not enough data" in caplog.text


def test_main_invalid_source_reports_error(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    config_path = tmp_path / "settings.json"
    _write_config(config_path, tmp_path / "prices.csv", data_source="XML")
    assert main([str(config_path)]) == 0
    assert "Invalid data source: XML" in caplog.text