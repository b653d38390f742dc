"""Core of the technical-analysis engine.

This package holds the indicator calculators, the signal rules that
classify their readings, and the report builder that runs them all over
a candle history.  All functions are side-effect free and deterministic
when given the same inputs.
"""

from .models import Action, Candle, IndicatorResult, Report, SignalSummary
from .indicators import (
    AdxResult,
    MacdResult,
    StochasticResult,
    compute_sma,
    compute_ema,
    ema_series,
    compute_rsi,
    compute_stochastic,
    compute_cci,
    compute_adx,
    compute_awesome_oscillator,
    compute_momentum,
    compute_macd,
    compute_stoch_rsi,
    compute_williams_r,
    compute_bull_bear_power,
    compute_ultimate_oscillator,
)
from .rules import (
    rsi_action,
    stochastic_action,
    cci_action,
    adx_action,
    zero_line_action,
    williams_r_action,
    moving_average_action,
)
from .report import MIN_CANDLES, analyze

__all__ = [
    "Action",
    "Candle",
    "IndicatorResult",
    "Report",
    "SignalSummary",
    "AdxResult",
    "MacdResult",
    "StochasticResult",
    "compute_sma",
    "compute_ema",
    "ema_series",
    "compute_rsi",
    "compute_stochastic",
    "compute_cci",
    "compute_adx",
    "compute_awesome_oscillator",
    "compute_momentum",
    "compute_macd",
    "compute_stoch_rsi",
    "compute_williams_r",
    "compute_bull_bear_power",
    "compute_ultimate_oscillator",
    "rsi_action",
    "stochastic_action",
    "cci_action",
    "adx_action",
    "zero_line_action",
    "williams_r_action",
    "moving_average_action",
    "MIN_CANDLES",
    "analyze",
]
