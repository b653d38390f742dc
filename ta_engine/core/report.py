"""
Build the full technical-analysis report for a candle history.

``analyze`` runs every calculator in a fixed order, classifies each
reading on the spot and returns an immutable :class:`Report`.  Nothing
is cached: each call recomputes everything from the candles it is given,
so callers decide how often analysis is worth running.

Short histories produce no report at all.  Placeholder readings from
individual calculators (see :mod:`ta_engine.core.indicators`) may
coincide with a genuine NEUTRAL reading; that ambiguity is accepted so
the pipeline never has a failing path.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from . import indicators as ind
from . import rules
from .models import IndicatorResult, Report

logger = logging.getLogger(__name__)

MIN_CANDLES = 100
MA_PERIODS = (10, 20, 30, 50, 100)


def _ohlc_arrays(series) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (highs, lows, closes) from an OHLC DataFrame or a candle sequence."""
    if isinstance(series, pd.DataFrame):
        return (
            series["high"].to_numpy(dtype=float),
            series["low"].to_numpy(dtype=float),
            series["close"].to_numpy(dtype=float),
        )
    candles = list(series)
    return (
        np.array([c.high for c in candles], dtype=float),
        np.array([c.low for c in candles], dtype=float),
        np.array([c.close for c in candles], dtype=float),
    )


def _oscillators(
    highs: np.ndarray, lows: np.ndarray, closes: np.ndarray
) -> List[IndicatorResult]:
    results: List[IndicatorResult] = []

    def add(label: str, value: float, action) -> None:
        results.append(IndicatorResult(label, float(value), action))

    rsi = ind.compute_rsi(closes, 14)
    add("RSI (14)", rsi, rules.rsi_action(rsi))

    stoch = ind.compute_stochastic(highs, lows, closes, 14, 3, 3)
    add("Stoch %K (14, 3, 3)", stoch.k, rules.stochastic_action(stoch.k))

    cci = ind.compute_cci(highs, lows, closes, 20)
    add("CCI (20)", cci, rules.cci_action(cci))

    adx = ind.compute_adx(highs, lows, closes, 14)
    add("ADX (14)", adx.adx, rules.adx_action(adx))

    ao = ind.compute_awesome_oscillator(highs, lows)
    add("AO", ao, rules.zero_line_action(ao))

    mom = ind.compute_momentum(closes, 10)
    add("Mom (10)", mom, rules.zero_line_action(mom))

    macd = ind.compute_macd(closes, 12, 26, 9)
    add("MACD (12, 26)", macd.hist, rules.zero_line_action(macd.hist))

    stoch_rsi = ind.compute_stoch_rsi(closes, 14, 14, 3, 3)
    add("Stoch RSI (3, 3, 14, 14)", stoch_rsi.k, rules.stochastic_action(stoch_rsi.k))

    wpr = ind.compute_williams_r(highs, lows, closes, 14)
    add("WPR (14)", wpr, rules.williams_r_action(wpr))

    bbp = ind.compute_bull_bear_power(highs, lows, closes, 13)
    add("BBP (13)", bbp, rules.zero_line_action(bbp))

    uo = ind.compute_ultimate_oscillator(highs, lows, closes, 7, 14, 28)
    add("UO (7, 14, 28)", uo, rules.rsi_action(uo))

    return results


def _moving_averages(closes: np.ndarray, periods: Iterable[int]) -> List[IndicatorResult]:
    price = closes[-1]
    results: List[IndicatorResult] = []
    for period in periods:
        sma = ind.compute_sma(closes, period)
        results.append(
            IndicatorResult(f"SMA ({period})", sma, rules.moving_average_action(price, sma))
        )
        ema = ind.compute_ema(closes, period)
        results.append(
            IndicatorResult(f"EMA ({period})", ema, rules.moving_average_action(price, ema))
        )
    return results


def analyze(series) -> Optional[Report]:
    """
    Compute the oscillator and moving-average report for ``series``
    (oldest candle first).

    ``series`` is either a sequence of candles with ``high``, ``low`` and
    ``close`` attributes or a DataFrame with those columns.  Returns
    ``None`` when fewer than ``MIN_CANDLES`` candles are supplied; the
    caller should treat that as "no analysis available", not as an error.
    """
    highs, lows, closes = _ohlc_arrays(series)
    if len(closes) < MIN_CANDLES:
        logger.debug("Skipping analysis: %d candles, need %d", len(closes), MIN_CANDLES)
        return None

    report = Report(
        oscillators=tuple(_oscillators(highs, lows, closes)),
        moving_averages=tuple(_moving_averages(closes, MA_PERIODS)),
    )
    logger.debug("Analyzed %d candles, last close %.5f", len(closes), closes[-1])
    return report
