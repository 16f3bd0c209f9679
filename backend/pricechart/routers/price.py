#backend/pricechart/routers/price.py
from typing import Optional

from fastapi import APIRouter, Query

from pricechart.core.config import settings
from pricechart.schemas import ErrorOut, PriceHistoryOut, PricePointOut
from pricechart.services.price_history import fetch_series

router = APIRouter(tags=["price"])

_ERRORS = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}, 502: {"model": ErrorOut}}


@router.get("/price-history", response_model=PriceHistoryOut, responses=_ERRORS)
def price_history(
    symbol: Optional[str] = Query(None, description="Provider symbol, e.g. aapl.us, btcusd"),
    interval: str = Query(settings.DEFAULT_INTERVAL, description="d, w or m"),
    days: int = Query(settings.DEFAULT_DAYS, ge=1, description="Most recent N rows"),
):
    """
    Historical OHLCV rows for `symbol`, most recent `days` rows in provider order.
    Errors come back as {"error": "..."} with 400 / 502 / 500.
    """
    series = fetch_series(symbol, interval=interval, days=days)
    return PriceHistoryOut(
        symbol=series.symbol,
        points=[PricePointOut.model_validate(p) for p in series.points],
    )
