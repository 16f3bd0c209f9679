# backend/pricechart/charting/summary.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence

from pricechart.models import PricePoint


@dataclass(frozen=True)
class PriceSummary:
    date: Optional[str]
    last: float
    change: float
    change_pct: float
    direction: Literal["up", "down"]
    open: float
    high: float
    low: float


def summarize(points: Sequence[PricePoint]) -> Optional[PriceSummary]:
    """Latest close and its change versus the previous session; None when empty."""
    if not points:
        return None
    latest = points[-1]
    prev = points[-2] if len(points) > 1 else None

    change = latest.close - prev.close if prev else 0.0
    change_pct = (change / prev.close) * 100 if prev and prev.close else 0.0

    return PriceSummary(
        date=latest.date,
        last=latest.close,
        change=change,
        change_pct=change_pct,
        direction="up" if change >= 0 else "down",
        open=latest.open,
        high=latest.high,
        low=latest.low,
    )
