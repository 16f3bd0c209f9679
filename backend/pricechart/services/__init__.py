# backend/pricechart/services/__init__.py
"""
Service modules: upstream CSV access and the price history pipeline
"""

from . import price_history
from . import stooq_data

__all__ = [
    "price_history",
    "stooq_data",
]
