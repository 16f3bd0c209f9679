# backend/pricechart/models/price.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

Interval = Literal["d", "w", "m"]

INTERVALS = ("d", "w", "m")


@dataclass(frozen=True)
class PricePoint:
    """One traded session. open/high/low may be NaN; close is always finite."""

    date: Optional[str]
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None


@dataclass(frozen=True)
class Series:
    symbol: str
    interval: Interval
    points: List[PricePoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)
