"""
Settings read from the environment.

* TA_LOG_LEVEL: level of the ``ta_engine`` logger (default: INFO)
* TA_MAX_CANDLES: most candles accepted per HTTP request (default: 5000)
"""
from __future__ import annotations

import os
from typing import Optional


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    # strip quotes/whitespace so .env "KEY=value " doesn't break things
    v = os.getenv(name)
    if v is None:
        return default
    v = v.strip()
    if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
        v = v[1:-1].strip()
    return v or default


LOG_LEVEL = (_env("TA_LOG_LEVEL", "INFO") or "INFO").upper()
MAX_CANDLES = int(_env("TA_MAX_CANDLES", "5000") or "5000")
