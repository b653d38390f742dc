"""
FastAPI application exposing the technical-analysis report.  The API
is stateless: every request carries the full candle history and the
report is recomputed from scratch.
"""
from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, validator

from ta_engine import config
from ta_engine.core import Candle, analyze

logger = logging.getLogger("ta_engine")
if not logger.handlers:
    _h = logging.StreamHandler()
    _h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
    logger.addHandler(_h)
logger.setLevel(config.LOG_LEVEL)

app = FastAPI(title="Technical Analysis API")


# ----------------------------------------------------------------------
# Models
# ----------------------------------------------------------------------
class CandleIn(BaseModel):
    timestamp: dt.datetime
    open: float
    high: float
    low: float
    close: float


class AnalysisRequest(BaseModel):
    candles: List[CandleIn] = Field(
        ..., description="OHLC candles ordered oldest to newest"
    )

    @validator("candles")
    def validate_candles(cls, v):
        if len(v) > config.MAX_CANDLES:
            raise ValueError(f"at most {config.MAX_CANDLES} candles per request")
        for prev, cur in zip(v, v[1:]):
            try:
                out_of_order = cur.timestamp < prev.timestamp
            except TypeError:
                # naive and timezone-aware datetimes do not compare
                raise ValueError("candles must use consistent timezones")
            if out_of_order:
                raise ValueError("candles must be in chronological order")
        return v


# ----------------------------------------------------------------------
# Endpoints
# ----------------------------------------------------------------------
@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/analysis")
async def run_analysis(req: AnalysisRequest) -> Dict[str, Any]:
    """
    Return the oscillator and moving-average report for the supplied
    candles.  Fewer than 100 candles is not an error: the response says
    no analysis is available.
    """
    candles = [
        Candle(
            timestamp=c.timestamp,
            open=c.open,
            high=c.high,
            low=c.low,
            close=c.close,
        )
        for c in req.candles
    ]
    try:
        report = analyze(candles)
    except Exception:
        logger.exception("Unhandled error in /analysis")
        raise HTTPException(status_code=500, detail="Internal server error")

    if report is None:
        logger.info("Analysis unavailable for %d candles", len(candles))
        return {"available": False, "report": None}
    return {"available": True, "report": report.to_dict()}
