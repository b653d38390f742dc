"""Technical indicator calculators on numpy/pandas.

Every function here is pure: it takes aligned high/low/close arrays
(lists, numpy arrays or pandas Series), and returns the indicator's
value at the last bar as a float or a small named tuple.  No function
raises for short input; each one returns a fixed placeholder instead
(50 for RSI, 0 for CCI, -50 for Williams %R, ...).  A zero denominator
is replaced by 1.

Several calculators only look at a trailing slice of the history
(200 closes for Stochastic RSI, ``5 * length`` bars for ADX).  Those
window sizes are part of the output and must not be changed.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import pandas as pd


class StochasticResult(NamedTuple):
    k: float
    d: float


class AdxResult(NamedTuple):
    adx: float
    pdi: float
    mdi: float


class MacdResult(NamedTuple):
    macd: float
    signal: float
    hist: float


def _as_array(values) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _nonzero(denominator: float) -> float:
    return denominator if denominator != 0 else 1.0


# ----------------------------------------------------------------------
# Moving averages
# ----------------------------------------------------------------------
def compute_sma(values, length: int) -> float:
    """
    Mean of the last ``length`` values.  Returns 0 when fewer than
    ``length`` values are available; 0 means "not enough data" here,
    not an average.
    """
    data = _as_array(values)
    if len(data) < length:
        return 0.0
    return float(data[-length:].mean())


def ema_series(values, length: int) -> np.ndarray:
    """
    Exponential moving average at every bar, seeded with the first value
    and smoothed with ``k = 2 / (length + 1)`` over the whole input.

    The update is written ``ema += k * (x - ema)`` so a constant input
    stays exactly constant.  It can differ from ``x * k + ema * (1 - k)``
    in the last bits (around 1e-13 at typical price levels), so golden
    values for EMA, MACD and Bull/Bear Power should be compared with a
    tolerance.
    """
    data = _as_array(values)
    k = 2.0 / (length + 1)
    out = np.empty_like(data)
    if len(data) == 0:
        return out
    ema = data[0]
    out[0] = ema
    for i in range(1, len(data)):
        ema += k * (data[i] - ema)
        out[i] = ema
    return out


def compute_ema(values, length: int) -> float:
    """
    Last value of :func:`ema_series`.  The result depends on how much
    history is passed in, since warm-up always starts at index 0.
    Returns 0 when fewer than ``length`` values are available.
    """
    data = _as_array(values)
    if len(data) < length:
        return 0.0
    return float(ema_series(data, length)[-1])


# ----------------------------------------------------------------------
# Building blocks
# ----------------------------------------------------------------------
def _rsi_series(closes: np.ndarray, length: int) -> np.ndarray:
    """
    Wilder RSI for every bar from ``length`` onwards.  Needs at least
    ``length + 1`` closes.
    """
    deltas = np.diff(closes)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas > 0, 0.0, -deltas)
    avg_gain = gains[:length].sum() / length
    avg_loss = losses[:length].sum() / length

    def _rsi(avg_up: float, avg_down: float) -> float:
        if avg_down == 0:
            return 100.0
        return 100.0 - 100.0 / (1.0 + avg_up / avg_down)

    out = [_rsi(avg_gain, avg_loss)]
    for gain, loss in zip(gains[length:], losses[length:]):
        avg_gain = (avg_gain * (length - 1) + gain) / length
        avg_loss = (avg_loss * (length - 1) + loss) / length
        out.append(_rsi(avg_gain, avg_loss))
    return np.asarray(out, dtype=float)


def _raw_stochastic(
    highs: np.ndarray, lows: np.ndarray, closes: np.ndarray, period: int
) -> np.ndarray:
    """Raw %K per bar; bars without a full window read 50."""
    highest = pd.Series(highs).rolling(window=period).max().to_numpy()
    lowest = pd.Series(lows).rolling(window=period).min().to_numpy()
    span = highest - lowest
    raw = (closes - lowest) / np.where(span == 0, 1.0, span) * 100
    raw[: period - 1] = 50.0
    return raw


def _smooth_k(raw: np.ndarray, k_smooth: int) -> np.ndarray:
    """Rolling mean of raw %K; the first ``k_smooth - 1`` values pass through."""
    smoothed = pd.Series(raw).rolling(window=k_smooth).mean().to_numpy(copy=True)
    smoothed[: k_smooth - 1] = raw[: k_smooth - 1]
    return smoothed


def _stochastic_from(smoothed: np.ndarray, d_smooth: int) -> StochasticResult:
    if len(smoothed) == 0:
        return StochasticResult(50.0, 50.0)
    # missing values count as zero when there are fewer than d_smooth
    d = smoothed[-d_smooth:].sum() / d_smooth
    return StochasticResult(float(smoothed[-1]), float(d))


# ----------------------------------------------------------------------
# Oscillators
# ----------------------------------------------------------------------
def compute_rsi(closes, length: int = 14) -> float:
    """
    Relative Strength Index with Wilder smoothing, seeded with the plain
    average of the first ``length`` moves.  100 when there were no
    losses at all; 50 when fewer than ``length + 1`` closes exist.
    """
    data = _as_array(closes)
    if len(data) < length + 1:
        return 50.0
    return float(_rsi_series(data, length)[-1])


def compute_stochastic(
    highs, lows, closes, period: int = 14, k_smooth: int = 3, d_smooth: int = 3
) -> StochasticResult:
    """
    Stochastic %K/%D.  Only the trailing ``period + k_smooth + d_smooth +
    50`` bars are scanned.
    """
    h, l, c = _as_array(highs), _as_array(lows), _as_array(closes)
    start = max(0, len(c) - (period + k_smooth + d_smooth + 50))
    raw = _raw_stochastic(h, l, c, period)[start:]
    return _stochastic_from(_smooth_k(raw, k_smooth), d_smooth)


def compute_cci(highs, lows, closes, length: int = 20) -> float:
    """Commodity Channel Index on the typical price."""
    c = _as_array(closes)
    if len(c) < length:
        return 0.0
    tp = ((_as_array(highs) + _as_array(lows) + c) / 3)[-length * 2:]
    window = tp[-length:]
    sma_tp = window.mean()
    mean_dev = np.abs(window - sma_tp).mean()
    return float((tp[-1] - sma_tp) / _nonzero(0.015 * mean_dev))


def _wilder_sum(src: np.ndarray, length: int) -> np.ndarray:
    val = src[:length].sum()
    out = [val]
    for x in src[length:]:
        val = val - val / length + x
        out.append(val)
    return np.asarray(out, dtype=float)


def compute_adx(highs, lows, closes, length: int = 14) -> AdxResult:
    """
    Average Directional Index with +DI/-DI over the trailing
    ``5 * length`` bars.  All zeros when fewer than ``2 * length`` closes
    are available.
    """
    h, l, c = _as_array(highs), _as_array(lows), _as_array(closes)
    if len(c) < length * 2:
        return AdxResult(0.0, 0.0, 0.0)

    start = max(1, len(c) - length * 5)
    high, low = h[start:], l[start:]
    prev_high, prev_low, prev_close = h[start - 1:-1], l[start - 1:-1], c[start - 1:-1]

    tr = np.maximum(high - low, np.maximum(np.abs(high - prev_close), np.abs(low - prev_close)))
    up = high - prev_high
    down = prev_low - low
    pdm = np.where((up > down) & (up > 0), up, 0.0)
    mdm = np.where((down > up) & (down > 0), down, 0.0)

    s_tr = _wilder_sum(tr, length)
    s_pdm = _wilder_sum(pdm, length)
    s_mdm = _wilder_sum(mdm, length)

    tr_safe = np.where(s_tr == 0, 1.0, s_tr)
    pdi = 100 * s_pdm / tr_safe
    mdi = 100 * s_mdm / tr_safe
    di_sum = pdi + mdi
    dx = np.abs(pdi - mdi) / np.where(di_sum == 0, 1.0, di_sum) * 100
    dx = np.where(np.isnan(dx), 0.0, dx)

    adx = dx[:length].sum() / length
    for x in dx[length:]:
        adx = (adx * (length - 1) + x) / length
    return AdxResult(float(adx), float(pdi[-1]), float(mdi[-1]))


def compute_awesome_oscillator(highs, lows) -> float:
    """SMA(5) minus SMA(34) of the bar midpoints."""
    h, l = _as_array(highs), _as_array(lows)
    if len(h) < 34:
        return 0.0
    midpoints = (h + l) / 2
    return compute_sma(midpoints, 5) - compute_sma(midpoints, 34)


def compute_momentum(closes, length: int = 10) -> float:
    c = _as_array(closes)
    if len(c) < length + 1:
        return 0.0
    return float(c[-1] - c[-1 - length])


def compute_macd(
    closes, fast: int = 12, slow: int = 26, signal: int = 9
) -> MacdResult:
    """
    MACD line, signal line and histogram at the last bar.  Both EMAs run
    pointwise over the full close history.
    """
    c = _as_array(closes)
    if len(c) < slow:
        return MacdResult(0.0, 0.0, 0.0)
    line = ema_series(c, fast) - ema_series(c, slow)
    signal_line = ema_series(line, signal)
    return MacdResult(
        float(line[-1]), float(signal_line[-1]), float(line[-1] - signal_line[-1])
    )


def compute_stoch_rsi(
    closes,
    rsi_length: int = 14,
    stoch_length: int = 14,
    k_smooth: int = 3,
    d_smooth: int = 3,
) -> StochasticResult:
    """
    Stochastic oscillator applied to the RSI series of the last 200
    closes.
    """
    subset = _as_array(closes)[-200:]
    if len(subset) < rsi_length + 1:
        return StochasticResult(50.0, 50.0)
    rsis = _rsi_series(subset, rsi_length)
    raw = _raw_stochastic(rsis, rsis, rsis, stoch_length)
    return _stochastic_from(_smooth_k(raw, k_smooth), d_smooth)


def compute_williams_r(highs, lows, closes, length: int = 14) -> float:
    """Williams %R, from 0 (at the high) to -100 (at the low)."""
    c = _as_array(closes)
    if len(c) < length:
        return -50.0
    highest = _as_array(highs)[-length:].max()
    lowest = _as_array(lows)[-length:].min()
    return float((highest - c[-1]) / _nonzero(highest - lowest) * -100)


def compute_bull_bear_power(highs, lows, closes, length: int = 13) -> float:
    ema = compute_ema(closes, length)
    return float((_as_array(highs)[-1] - ema) + (_as_array(lows)[-1] - ema))


def compute_ultimate_oscillator(
    highs, lows, closes, p1: int = 7, p2: int = 14, p3: int = 28
) -> float:
    """
    Ultimate Oscillator from buying pressure and true range over the
    trailing ``p3 + 50`` bars, weighted 4:2:1 across the three periods.
    """
    h, l, c = _as_array(highs), _as_array(lows), _as_array(closes)
    start = max(1, len(c) - p3 - 50)
    prev_close = c[start - 1:-1]
    floor = np.minimum(l[start:], prev_close)
    buying_pressure = c[start:] - floor
    true_range = np.maximum(h[start:], prev_close) - floor

    def _average(period: int) -> float:
        return buying_pressure[-period:].sum() / _nonzero(true_range[-period:].sum())

    return float(100 * (4 * _average(p1) + 2 * _average(p2) + _average(p3)) / 7)
