from .geometry import (
    ChartGeometry,
    DateTick,
    Padding,
    Viewport,
    compute_geometry,
    format_number,
)
from .summary import PriceSummary, summarize

__all__ = [
    "ChartGeometry",
    "DateTick",
    "Padding",
    "Viewport",
    "compute_geometry",
    "format_number",
    "PriceSummary",
    "summarize",
]
