# backend/pricechart/services/stooq_data.py
from __future__ import annotations

import io
import math
from typing import Any, Dict, List, Optional

import pandas as pd
import requests

from pricechart.core.config import settings
from pricechart.core.errors import UpstreamError
from pricechart.logger import get_logger
from pricechart.models import PricePoint

log = get_logger(__name__)

CSV_COLUMNS = ("Date", "Open", "High", "Low", "Close", "Volume")


def fetch_stooq_csv(symbol: str, interval: str = "d") -> str:
    """
    Download the raw CSV series for `symbol` at `interval` (d/w/m).
    Raises UpstreamError when Stooq answers with a non-success status.
    Transport errors (requests.RequestException) propagate to the caller.
    """
    params = {"s": symbol, "i": interval}
    r = requests.get(settings.STOOQ_CSV_URL, params=params, timeout=settings.UPSTREAM_TIMEOUT_SECONDS)
    if not 200 <= r.status_code < 300:
        log.warning("stooq returned %s for %s (%s)", r.status_code, symbol, interval)
        raise UpstreamError(f"Upstream error: {r.status_code}", upstream_status=r.status_code)
    return r.text


def _cell_text(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, float) and math.isnan(v):
        return ""
    return str(v).strip()


def _column_map(columns) -> Dict[str, Optional[str]]:
    # first occurrence wins; pandas renames later duplicates to "Name.1"
    present: Dict[str, str] = {}
    for col in columns:
        present.setdefault(str(col).strip(), col)
    return {name: present.get(name) for name in CSV_COLUMNS}


def _read_frame(text: str) -> pd.DataFrame:
    try:
        return pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines="skip",
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()


def parse_price_csv(text: str) -> List[PricePoint]:
    """
    Parse a header + rows CSV body into PricePoints, in source order.

    Columns are looked up by header name; a missing column yields NaN (prices)
    or None (date, volume) instead of an error. Rows whose Close is not a
    finite number are dropped.
    """
    frame = _read_frame(text or "")
    if frame.empty:
        return []

    cols = _column_map(frame.columns)
    cells = {
        name: (frame[col].map(_cell_text) if col is not None else None)
        for name, col in cols.items()
    }

    def numeric(name: str) -> List[float]:
        raw = cells[name]
        if raw is None:
            return [float("nan")] * len(frame)
        return [float(x) for x in pd.to_numeric(raw, errors="coerce")]

    dates = list(cells["Date"]) if cells["Date"] is not None else [None] * len(frame)
    opens, highs, lows, closes = (numeric(n) for n in ("Open", "High", "Low", "Close"))

    volumes: List[Optional[float]] = [None] * len(frame)
    if cells["Volume"] is not None:
        for i, (txt, num) in enumerate(zip(cells["Volume"], numeric("Volume"))):
            if txt and math.isfinite(num):
                volumes[i] = num

    out: List[PricePoint] = []
    for d, o, h, lo, c, v in zip(dates, opens, highs, lows, closes, volumes):
        if not math.isfinite(c):
            continue
        out.append(PricePoint(date=d, open=o, high=h, low=lo, close=c, volume=v))

    dropped = len(frame) - len(out)
    if dropped:
        log.debug("stooq csv: dropped %d of %d rows without a finite close", dropped, len(frame))
    return out
