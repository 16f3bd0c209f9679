from .price import INTERVALS, Interval, PricePoint, Series

__all__ = ["INTERVALS", "Interval", "PricePoint", "Series"]
