# backend/pricechart/routers/__init__.py
"""
Router modules for API endpoints
"""

from . import health
from . import price
from . import chart

__all__ = [
    "health",
    "price",
    "chart",
]
