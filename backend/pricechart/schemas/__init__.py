# backend/pricechart/schemas/__init__.py
"""
Response schemas for the price history and chart endpoints.
"""

from pricechart.schemas.price import (
    ChartGeometryOut,
    ChartOut,
    DateTickOut,
    ErrorOut,
    PriceHistoryOut,
    PricePointOut,
    PriceSummaryOut,
)

__all__ = [
    "ChartGeometryOut",
    "ChartOut",
    "DateTickOut",
    "ErrorOut",
    "PriceHistoryOut",
    "PricePointOut",
    "PriceSummaryOut",
]
