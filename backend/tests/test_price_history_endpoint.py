# backend/tests/test_price_history_endpoint.py
import requests


def test_price_history_end_to_end(client, upstream):
    r = client.get("/api/price-history", params={"symbol": "AAPL.US", "interval": "d", "days": 1})
    assert r.status_code == 200
    data = r.json()
    assert data["symbol"] == "aapl.us"
    assert data["points"] == [
        {"date": "2024-01-03", "open": 104, "high": 106, "low": 103, "close": 105, "volume": 1200}
    ]
    assert upstream.calls[0]["params"] == {"s": "aapl.us", "i": "d"}


def test_defaults_to_daily_interval(client, upstream):
    r = client.get("/api/price-history", params={"symbol": "aapl.us"})
    assert r.status_code == 200
    assert len(r.json()["points"]) == 2
    assert upstream.calls[0]["params"]["i"] == "d"


def test_missing_symbol_is_400(client, upstream):
    r = client.get("/api/price-history", params={"days": 10})
    assert r.status_code == 400
    assert "symbol" in r.json()["error"]
    assert upstream.calls == []


def test_invalid_params_are_400(client):
    r = client.get("/api/price-history", params={"symbol": "aapl.us", "days": 0})
    assert r.status_code == 400
    assert "error" in r.json()

    r = client.get("/api/price-history", params={"symbol": "aapl.us", "interval": "x"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_upstream_500_is_502(client, upstream):
    upstream.status_code = 500
    r = client.get("/api/price-history", params={"symbol": "aapl.us", "days": 10})
    assert r.status_code == 502
    assert "500" in r.json()["error"]


def test_network_error_is_500(client, upstream):
    upstream.error = requests.Timeout("read timed out")
    r = client.get("/api/price-history", params={"symbol": "aapl.us"})
    assert r.status_code == 500
    body = r.json()
    assert body == {"error": "read timed out"}


def test_non_finite_prices_serialize_as_null(client, upstream):
    upstream.text = "Date,Open,High,Low,Close,Volume\n2024-01-02,abc,105,99,104,\n"
    r = client.get("/api/price-history", params={"symbol": "aapl.us"})
    assert r.status_code == 200
    (point,) = r.json()["points"]
    assert point["open"] is None
    assert point["close"] == 104
    assert point["volume"] is None


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_upstream_redirect_status_is_502(client, upstream):
    upstream.status_code = 304
    r = client.get("/api/price-history", params={"symbol": "aapl.us"})
    assert r.status_code == 502
    assert r.json() == {"error": "Upstream error: 304"}


def test_large_days_is_accepted(client, upstream):
    r = client.get("/api/price-history", params={"symbol": "aapl.us", "days": 10000})
    assert r.status_code == 200
    assert len(r.json()["points"]) == 2


def test_unknown_route_uses_error_body(client):
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_body(client):
    r = client.post("/api/price-history", params={"symbol": "aapl.us"})
    assert r.status_code == 405
    assert r.json() == {"error": "Method Not Allowed"}
