# backend/tests/conftest.py
import os
import pathlib
import tempfile
import pytest

# keep test logs out of the source tree; must be set before pricechart is imported
os.environ["LOG_DIR"] = str(pathlib.Path(tempfile.gettempdir()) / "pricechart-test-logs")
os.environ["STOOQ_CSV_URL"] = "https://stooq.test/q/d/l/"

SAMPLE_CSV = (
    "Date,Open,High,Low,Close,Volume\n"
    "2024-01-02,100,105,99,104,1000\n"
    "2024-01-03,104,106,103,105,1200\n"
)


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300


class FakeUpstream:
    """Stands in for requests.get inside the Stooq service and records each call."""

    def __init__(self):
        self.status_code = 200
        self.text = SAMPLE_CSV
        self.error = None
        self.calls = []

    def __call__(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status_code, self.text)


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr("pricechart.services.stooq_data.requests.get", fake)
    return fake


@pytest.fixture
def client(upstream):
    # import AFTER patches
    from fastapi.testclient import TestClient
    from pricechart.main import app

    # use context manager so lifespan startup/shutdown run
    with TestClient(app) as c:
        yield c
