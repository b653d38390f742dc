import datetime as dt

from fastapi.testclient import TestClient

from ta_engine.app.api import app

client = TestClient(app)


def _payload(n, step=1.0):
    start = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)
    candles = []
    for i in range(n):
        close = 100.0 + i * step
        candles.append(
            {
                "timestamp": (start + dt.timedelta(minutes=15 * i)).isoformat(),
                "open": close,
                "high": close + 0.5,
                "low": close - 0.5,
                "close": close,
            }
        )
    return {"candles": candles}


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_analysis_returns_report():
    resp = client.post("/analysis", json=_payload(120))
    assert resp.status_code == 200
    body = resp.json()
    assert body["available"] is True
    report = body["report"]
    assert len(report["oscillators"]) == 11
    assert len(report["moving_averages"]) == 10
    assert report["oscillators"][0]["label"] == "RSI (14)"
    assert report["moving_averages"][-1] == {
        "label": "EMA (100)",
        "value": report["moving_averages"][-1]["value"],
        "action": "BUY",
    }


def test_analysis_unavailable_for_short_history():
    resp = client.post("/analysis", json=_payload(99))
    assert resp.status_code == 200
    assert resp.json() == {"available": False, "report": None}


def test_analysis_rejects_unordered_candles():
    payload = _payload(120)
    payload["candles"].reverse()
    resp = client.post("/analysis", json=payload)
    assert resp.status_code == 422


def test_analysis_rejects_mixed_timezones():
    payload = _payload(120, step=0.0)
    for i, candle in enumerate(payload["candles"]):
        if i % 2 == 0:
            # drop the "+00:00" suffix so every other timestamp is naive
            candle["timestamp"] = candle["timestamp"][:-6]
    resp = TestClient(app, raise_server_exceptions=False).post("/analysis", json=payload)
    assert resp.status_code == 422
