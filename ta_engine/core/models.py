"""Value types shared by the calculators, the classifier and the report.

Everything here is immutable: a ``Report`` is built once per analysis
request and handed to the caller, who owns it exclusively.
"""
from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Candle:
    timestamp: dt.datetime
    open: float
    high: float
    low: float
    close: float


class Action(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True)
class IndicatorResult:
    label: str
    value: Optional[float]
    action: Action

    def to_dict(self) -> Dict[str, Any]:
        value = self.value
        if value is not None and not math.isfinite(value):
            value = None
        return {"label": self.label, "value": value, "action": self.action.value}


@dataclass(frozen=True)
class SignalSummary:
    buy: int
    sell: int
    neutral: int

    @classmethod
    def from_results(cls, results: Iterable[IndicatorResult]) -> "SignalSummary":
        actions = [r.action for r in results]
        return cls(
            buy=actions.count(Action.BUY),
            sell=actions.count(Action.SELL),
            neutral=actions.count(Action.NEUTRAL),
        )


@dataclass(frozen=True)
class Report:
    oscillators: Tuple[IndicatorResult, ...]
    moving_averages: Tuple[IndicatorResult, ...]

    def summary(self) -> Dict[str, SignalSummary]:
        """Buy/sell/neutral tallies per group, as shown on the gauges."""
        return {
            "oscillators": SignalSummary.from_results(self.oscillators),
            "moving_averages": SignalSummary.from_results(self.moving_averages),
            "overall": SignalSummary.from_results(
                self.oscillators + self.moving_averages
            ),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "oscillators": [r.to_dict() for r in self.oscillators],
            "moving_averages": [r.to_dict() for r in self.moving_averages],
            "summary": {
                name: {"buy": s.buy, "sell": s.sell, "neutral": s.neutral}
                for name, s in self.summary().items()
            },
        }
