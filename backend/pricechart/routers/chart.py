# backend/pricechart/routers/chart.py
from typing import Optional

from fastapi import APIRouter, Query

from pricechart.charting import Viewport, compute_geometry, summarize
from pricechart.core.config import settings
from pricechart.schemas import ChartGeometryOut, ChartOut, ErrorOut, PricePointOut, PriceSummaryOut
from pricechart.services.price_history import fetch_series

router = APIRouter(tags=["chart"])

_ERRORS = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}, 502: {"model": ErrorOut}}


@router.get("/chart/geometry", response_model=ChartOut, responses=_ERRORS)
def chart_geometry(
    symbol: Optional[str] = Query(None, description="Provider symbol, e.g. aapl.us"),
    interval: str = Query(settings.DEFAULT_INTERVAL, description="d, w or m"),
    days: int = Query(settings.DEFAULT_DAYS, ge=1),
    width: int = Query(settings.CHART_WIDTH, ge=1, le=10_000),
    height: int = Query(settings.CHART_HEIGHT, ge=1, le=10_000),
):
    """
    Same series as /price-history plus server-computed chart geometry.
    Response:
    {
      "symbol": "aapl.us",
      "interval": "d",
      "points": [...],
      "geometry": {"path_d": "M 44 ...", "area_path_d": "...", "value_ticks": [...], ...},
      "summary": {"last": 189.23, "change": 1.2, "change_pct": 0.64, ...}
    }
    """
    series = fetch_series(symbol, interval=interval, days=days)
    geometry = compute_geometry(series.points, Viewport(width=width, height=height))
    summary = summarize(series.points)

    return ChartOut(
        symbol=series.symbol,
        interval=series.interval,
        points=[PricePointOut.model_validate(p) for p in series.points],
        geometry=ChartGeometryOut.model_validate(geometry),
        summary=PriceSummaryOut.model_validate(summary) if summary else None,
    )
