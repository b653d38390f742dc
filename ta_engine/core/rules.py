"""
Map indicator readings to BUY / SELL / NEUTRAL.

Each rule is a pure function of one reading (or one tuple of readings)
and returns an :class:`~ta_engine.core.models.Action`.  Three-way rules
return NEUTRAL for anything between their thresholds, including NaN.
The moving-average rule is binary: price strictly above the average is
BUY, anything else is SELL.
"""
from __future__ import annotations

from .indicators import AdxResult
from .models import Action


def _band(value: float, low: float, high: float) -> Action:
    """BUY below ``low``, SELL above ``high``, NEUTRAL otherwise."""
    if value < low:
        return Action.BUY
    if value > high:
        return Action.SELL
    return Action.NEUTRAL


def rsi_action(value: float) -> Action:
    """RSI and Ultimate Oscillator: oversold <30, overbought >70."""
    return _band(value, 30.0, 70.0)


def stochastic_action(value: float) -> Action:
    """Stochastic %K and Stochastic RSI %K: oversold <20, overbought >80."""
    return _band(value, 20.0, 80.0)


def cci_action(value: float) -> Action:
    return _band(value, -100.0, 100.0)


def williams_r_action(value: float) -> Action:
    return _band(value, -80.0, -20.0)


def zero_line_action(value: float) -> Action:
    """AO, Momentum, MACD histogram, Bull/Bear Power: sign of the reading."""
    if value > 0:
        return Action.BUY
    if value < 0:
        return Action.SELL
    return Action.NEUTRAL


def adx_action(result: AdxResult) -> Action:
    """
    A trend stronger than 25 takes the side of the dominant directional
    indicator; a weak trend or a tie between +DI and -DI is NEUTRAL.
    """
    if result.adx > 25 and result.pdi > result.mdi:
        return Action.BUY
    if result.adx > 25 and result.mdi > result.pdi:
        return Action.SELL
    return Action.NEUTRAL


def moving_average_action(price: float, average: float) -> Action:
    if price > average:
        return Action.BUY
    return Action.SELL
