# backend/pricechart/schemas/price.py
from __future__ import annotations

import math
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_serializer


def _finite_or_none(v: Optional[float]) -> Optional[float]:
    if v is None or not math.isfinite(v):
        return None
    return v


class PricePointOut(BaseModel):
    """One OHLCV session. Non-finite numbers are written as null."""

    model_config = ConfigDict(from_attributes=True)

    date: Optional[str]
    open: Optional[float]
    high: Optional[float]
    low: Optional[float]
    close: Optional[float]
    volume: Optional[float] = None

    @field_serializer("open", "high", "low", "close", "volume")
    def _serialize_number(self, v: Optional[float]) -> Optional[float]:
        return _finite_or_none(v)


class PriceHistoryOut(BaseModel):
    symbol: str
    points: List[PricePointOut]


class ErrorOut(BaseModel):
    error: str


class DateTickOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    x: float
    label: str


class ChartGeometryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    path_d: str
    area_path_d: str
    min_y: float
    max_y: float
    value_ticks: List[float]
    value_labels: List[str]
    date_ticks: List[DateTickOut]
    view_box: str


class PriceSummaryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: Optional[str]
    last: float
    change: float
    change_pct: float
    direction: Literal["up", "down"]
    open: Optional[float]
    high: Optional[float]
    low: Optional[float]

    @field_serializer("open", "high", "low")
    def _serialize_number(self, v: Optional[float]) -> Optional[float]:
        return _finite_or_none(v)


class ChartOut(BaseModel):
    symbol: str
    interval: str
    points: List[PricePointOut]
    geometry: ChartGeometryOut
    summary: Optional[PriceSummaryOut] = None
