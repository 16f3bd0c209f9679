# backend/pricechart/client/dashboard.py
"""
Client-side consumer of /api/price-history.

DashboardController holds the current (symbol, days) selection, issues one
fetch per change and keeps the chart geometry in sync with the loaded points
and the viewport. Each load is stamped with a generation token; a response
that arrives after a newer load has started is discarded (the request itself
is left to finish).
"""
from __future__ import annotations

import asyncio
import math
from typing import Any, Dict, List, Optional

import requests

from pricechart.charting import ChartGeometry, PriceSummary, Viewport, compute_geometry, summarize
from pricechart.core.config import settings
from pricechart.logger import get_logger
from pricechart.models import PricePoint

log = get_logger(__name__)

RANGE_PRESETS: Dict[str, int] = {"1M": 30, "3M": 90, "6M": 180, "1Y": 365, "2Y": 730}


class PriceHistoryClientError(Exception):
    """Raised when a price history request fails (network, status or JSON)."""


def _num(v: Any) -> float:
    return float("nan") if v is None else float(v)


def point_from_json(d: Dict[str, Any]) -> PricePoint:
    vol = d.get("volume")
    return PricePoint(
        date=d.get("date"),
        open=_num(d.get("open")),
        high=_num(d.get("high")),
        low=_num(d.get("low")),
        close=_num(d.get("close")),
        volume=None if vol is None else float(vol),
    )


class PriceHistoryClient:
    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch(self, symbol: str, days: int, interval: str = "d") -> List[PricePoint]:
        params = {"symbol": symbol, "interval": interval, "days": str(days)}
        try:
            r = self._session.get(f"{self.base_url}/api/price-history", params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise PriceHistoryClientError(str(e) or e.__class__.__name__) from e
        if not 200 <= r.status_code < 300:
            raise PriceHistoryClientError(f"HTTP {r.status_code}")
        try:
            payload = r.json()
        except ValueError as e:
            raise PriceHistoryClientError("Invalid JSON in price history response") from e

        points = []
        try:
            for raw in payload.get("points") or []:
                pt = point_from_json(raw)
                if math.isfinite(pt.close):
                    points.append(pt)
        except (AttributeError, TypeError, ValueError) as e:
            raise PriceHistoryClientError(f"Unexpected price history payload: {e}") from e
        return points


class DashboardController:
    def __init__(
        self,
        client: PriceHistoryClient,
        symbol: str = "",
        days: Optional[int] = None,
        interval: Optional[str] = None,
        viewport: Optional[Viewport] = None,
    ):
        self._client = client
        self.symbol = symbol
        self.days = days if days is not None else settings.DEFAULT_DAYS
        self.interval = interval or settings.DEFAULT_INTERVAL
        self.viewport = viewport or Viewport()

        self.loading = False
        self.error: Optional[str] = None
        self.points: List[PricePoint] = []
        self.geometry: ChartGeometry = compute_geometry([], self.viewport)
        self.summary: Optional[PriceSummary] = None
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def select(self, symbol: Optional[str] = None, days: Optional[int] = None) -> bool:
        """Update the selection; True when it actually changed."""
        changed = False
        if symbol is not None and symbol != self.symbol:
            self.symbol = symbol
            changed = True
        if days is not None and days != self.days:
            if days <= 0:
                raise ValueError("days must be a positive integer")
            self.days = days
            changed = True
        return changed

    async def choose(self, symbol: Optional[str] = None, days: Optional[int] = None) -> bool:
        if not self.select(symbol=symbol, days=days):
            return False
        return await self.load()

    async def load(self) -> bool:
        """Fetch the current selection; True when the result was applied."""
        if not self.symbol:
            return False
        self._generation += 1
        token = self._generation
        symbol, days, interval = self.symbol, self.days, self.interval

        self.loading = True
        self.error = None
        try:
            points = await asyncio.to_thread(self._client.fetch, symbol, days, interval)
        except PriceHistoryClientError as e:
            if token != self._generation:
                log.debug("discarding stale failure for %s (token %d)", symbol, token)
                return False
            log.warning("price history load failed for %s: %s", symbol, e)
            self.error = str(e) or "Failed to load data"
            self._set_points([])
            return False
        finally:
            if token == self._generation:
                self.loading = False

        if token != self._generation:
            log.debug("discarding stale response for %s (token %d)", symbol, token)
            return False
        self._set_points(points)
        return True

    def resize(self, width: float, height: float) -> ChartGeometry:
        self.viewport = Viewport(width=width, height=height, padding=self.viewport.padding)
        self.geometry = compute_geometry(self.points, self.viewport)
        return self.geometry

    def _set_points(self, points: List[PricePoint]) -> None:
        self.points = list(points)
        self.geometry = compute_geometry(self.points, self.viewport)
        self.summary = summarize(self.points)
