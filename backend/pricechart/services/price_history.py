# backend/pricechart/services/price_history.py
from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

from pricechart.core.config import settings
from pricechart.core.errors import InternalError, PriceHistoryError
from pricechart.logger import get_logger
from pricechart.models import PricePoint, Series
from pricechart.services.stooq_data import fetch_stooq_csv, parse_price_csv
from pricechart.utils.validators import require_days, require_interval, require_symbol

log = get_logger(__name__)

T = TypeVar("T")


def last_rows(rows: Sequence[T], days: int) -> List[T]:
    """Most recent `days` rows in source order (row count, not calendar days)."""
    return list(rows[max(0, len(rows) - days):])


def fetch_series(symbol: str, interval: Optional[str] = None, days: Optional[int] = None) -> Series:
    """
    Fetch, parse and window one price series.

    One upstream call per invocation, no cache and no retry.
    Raises MissingParameter, UpstreamError or InternalError.
    """
    sym = require_symbol(symbol)
    iv = require_interval(interval if interval is not None else settings.DEFAULT_INTERVAL)
    n = require_days(days if days is not None else settings.DEFAULT_DAYS)

    try:
        text = fetch_stooq_csv(sym, iv)
        points: List[PricePoint] = parse_price_csv(text)
    except PriceHistoryError:
        raise
    except Exception as e:
        log.exception("price history failed for %s (%s)", sym, iv)
        raise InternalError(str(e) or e.__class__.__name__) from e

    window = last_rows(points, n)
    log.info("price history symbol=%s interval=%s rows=%d returned=%d", sym, iv, len(points), len(window))
    return Series(symbol=sym, interval=iv, points=window)
