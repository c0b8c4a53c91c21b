import pytest

from obtrader.trade import Trade


def test_long_profit():
    trade = Trade(True, "ABC", "2024-01-01", 100.0, "2024-01-05", 110.0, 95.0, 120.0)
    assert trade.profit == trade.exit_price - trade.entry_price
    assert trade.profit > 0


def test_short_profit():
    trade = Trade(False, "ABC", "2024-01-01", 100.0, "2024-01-05", 90.0, 105.0, 80.0)
    assert trade.profit == trade.entry_price - trade.exit_price
    assert trade.profit > 0


def test_long_risk_reward():
    trade = Trade(True, "ABC", "d1", 100.0, "d2", 110.0, 95.0)
    risk = trade.entry_price - trade.stop_loss
    assert trade.risk_reward_ratio * risk == pytest.approx(trade.profit)


def test_short_risk_reward():
    trade = Trade(False, "ABC", "d1", 100.0, "d2", 94.0, 103.0)
    risk = trade.stop_loss - trade.entry_price
    assert trade.risk_reward_ratio * risk == pytest.approx(trade.profit)


def test_zero_risk_gives_zero_ratio():
    trade = Trade(True, "ABC", "d1", 100.0, "d2", 110.0, stop_loss=100.0)
    assert trade.risk_reward_ratio == 0.0


def test_short_with_default_stop_has_zero_ratio():
    trade = Trade(False, "ABC", "d1", 100.0, "d2", 90.0)
    assert trade.stop_loss == 0.0
    assert trade.take_profit == 0.0
    assert trade.risk_reward_ratio == 0.0


def test_losing_long_has_negative_values():
    trade = Trade(True, "ABC", "d1", 100.0, "d2", 97.0, 95.0)
    assert trade.profit < 0
    assert trade.risk_reward_ratio < 0