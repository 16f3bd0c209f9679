import pytest
import requests

from pricechart.core.errors import InternalError, MissingParameter, UpstreamError
from pricechart.services.price_history import fetch_series, last_rows


def _csv(n):
    rows = ["Date,Open,High,Low,Close,Volume"]
    for i in range(n):
        rows.append(f"2024-02-{i + 1:02d},{10 + i},{11 + i},{9 + i},{10.5 + i},{100 * (i + 1)}")
    return "\n".join(rows) + "\n"


@pytest.mark.parametrize("days,n", [(1, 5), (3, 5), (5, 5), (10, 5), (4, 0)])
def test_window_is_last_min_days_rows(upstream, days, n):
    upstream.text = _csv(n)
    series = fetch_series("AAPL.US", interval="d", days=days)
    expected = [f"2024-02-{i + 1:02d}" for i in range(n)][max(0, n - days):]
    assert [p.date for p in series.points] == expected
    assert len(series) == min(days, n)


def test_window_counts_rows_after_filtering(upstream):
    upstream.text = (
        "Date,Open,High,Low,Close,Volume\n"
        "2024-01-02,1,1,1,1,1\n"
        "2024-01-03,1,1,1,2,1\n"
        "2024-01-04,1,1,1,bad,1\n"
    )
    series = fetch_series("x", days=2)
    assert [p.date for p in series.points] == ["2024-01-02", "2024-01-03"]


def test_symbol_is_lowercased_and_sent_upstream(upstream):
    series = fetch_series("  AAPL.US ", interval="w", days=30)
    assert series.symbol == "aapl.us"
    assert series.interval == "w"
    assert len(upstream.calls) == 1
    call = upstream.calls[0]
    assert call["url"] == "https://stooq.test/q/d/l/"
    assert call["params"] == {"s": "aapl.us", "i": "w"}
    assert call["timeout"] is None


def test_every_call_hits_upstream(upstream):
    fetch_series("aapl.us", days=1)
    fetch_series("aapl.us", days=1)
    assert len(upstream.calls) == 2


@pytest.mark.parametrize("symbol", [None, "", "   "])
def test_missing_symbol(upstream, symbol):
    with pytest.raises(MissingParameter):
        fetch_series(symbol, days=10)
    assert upstream.calls == []


def test_invalid_interval_and_days(upstream):
    with pytest.raises(MissingParameter):
        fetch_series("aapl.us", interval="h", days=10)
    with pytest.raises(MissingParameter):
        fetch_series("aapl.us", days=0)


def test_upstream_status_is_carried(upstream):
    upstream.status_code = 503
    with pytest.raises(UpstreamError) as ei:
        fetch_series("aapl.us", days=10)
    assert ei.value.upstream_status == 503
    assert ei.value.status_code == 502
    assert len(upstream.calls) == 1


def test_network_failure_is_internal_error(upstream):
    upstream.error = requests.ConnectionError("connection refused")
    with pytest.raises(InternalError) as ei:
        fetch_series("aapl.us", days=10)
    assert "connection refused" in ei.value.message
    assert len(upstream.calls) == 1


def test_last_rows():
    assert last_rows([1, 2, 3], 2) == [2, 3]
    assert last_rows([1, 2, 3], 5) == [1, 2, 3]
    assert last_rows([], 3) == []


@pytest.mark.parametrize("status", [301, 302, 304])
def test_redirect_status_is_upstream_error(upstream, status):
    upstream.status_code = status
    with pytest.raises(UpstreamError) as ei:
        fetch_series("aapl.us", days=5)
    assert ei.value.upstream_status == status


def test_defaults_come_from_settings(upstream, monkeypatch):
    from pricechart.core.config import settings

    monkeypatch.setattr(settings, "DEFAULT_DAYS", 1)
    monkeypatch.setattr(settings, "DEFAULT_INTERVAL", "w")
    series = fetch_series("aapl.us")
    assert [p.date for p in series.points] == ["2024-01-03"]
    assert upstream.calls[0]["params"]["i"] == "w"
