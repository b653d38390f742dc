"""Technical-analysis engine for the trading simulator."""

from .core import Action, Candle, IndicatorResult, MIN_CANDLES, Report, analyze

__all__ = ["Action", "Candle", "IndicatorResult", "MIN_CANDLES", "Report", "analyze"]
