import pytest

from ta_engine.core.indicators import AdxResult
from ta_engine.core.models import Action
from ta_engine.core.rules import (
    adx_action,
    cci_action,
    moving_average_action,
    rsi_action,
    stochastic_action,
    williams_r_action,
    zero_line_action,
)


@pytest.mark.parametrize(
    "value, expected",
    [(29.9, Action.BUY), (30.0, Action.NEUTRAL), (70.0, Action.NEUTRAL), (70.1, Action.SELL)],
)
def test_rsi_action(value, expected):
    assert rsi_action(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [(19.9, Action.BUY), (20.0, Action.NEUTRAL), (80.0, Action.NEUTRAL), (80.1, Action.SELL)],
)
def test_stochastic_action(value, expected):
    assert stochastic_action(value) is expected


def test_cci_action():
    assert cci_action(-100.1) is Action.BUY
    assert cci_action(-100.0) is Action.NEUTRAL
    assert cci_action(100.0) is Action.NEUTRAL
    assert cci_action(100.1) is Action.SELL


def test_williams_r_action():
    assert williams_r_action(-80.1) is Action.BUY
    assert williams_r_action(-50.0) is Action.NEUTRAL
    assert williams_r_action(-19.9) is Action.SELL


def test_zero_line_action_has_no_dead_band():
    assert zero_line_action(1e-12) is Action.BUY
    assert zero_line_action(-1e-12) is Action.SELL
    assert zero_line_action(0.0) is Action.NEUTRAL


def test_adx_action():
    assert adx_action(AdxResult(30.0, 25.0, 10.0)) is Action.BUY
    assert adx_action(AdxResult(30.0, 10.0, 25.0)) is Action.SELL
    assert adx_action(AdxResult(30.0, 20.0, 20.0)) is Action.NEUTRAL
    assert adx_action(AdxResult(25.0, 40.0, 10.0)) is Action.NEUTRAL
    assert adx_action(AdxResult(0.0, 0.0, 0.0)) is Action.NEUTRAL


def test_moving_average_action_is_binary():
    assert moving_average_action(101.0, 100.0) is Action.BUY
    assert moving_average_action(100.0, 100.0) is Action.SELL
    assert moving_average_action(99.0, 100.0) is Action.SELL


def test_nan_reading_is_neutral():
    nan = float("nan")
    assert rsi_action(nan) is Action.NEUTRAL
    assert zero_line_action(nan) is Action.NEUTRAL
    assert moving_average_action(100.0, nan) is Action.SELL
