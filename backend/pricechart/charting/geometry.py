# backend/pricechart/charting/geometry.py
"""
Screen-space geometry for the price line/area chart.

compute_geometry() is pure: identical points and viewport always produce
identical paths, ticks and labels. Callers recompute it whenever either input
changes; nothing here is cached or mutated.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date as _date
from typing import Callable, List, Optional, Sequence

from pricechart.models import PricePoint

VALUE_TICKS = 5
DATE_TICKS = 5
RANGE_PAD = 0.05
MIN_SPAN = 1e-6


@dataclass(frozen=True)
class Padding:
    top: float = 16
    right: float = 32
    bottom: float = 24
    left: float = 44


@dataclass(frozen=True)
class Viewport:
    width: float = 1800
    height: float = 420
    padding: Padding = field(default_factory=Padding)

    @property
    def baseline(self) -> float:
        return self.height - self.padding.bottom

    @property
    def right_edge(self) -> float:
        return self.width - self.padding.right


@dataclass(frozen=True)
class DateTick:
    x: float
    label: str


@dataclass(frozen=True)
class ChartGeometry:
    path_d: str
    area_path_d: str
    min_y: float
    max_y: float
    value_ticks: List[float]
    value_labels: List[str]
    date_ticks: List[DateTick]
    view_box: str


def format_number(n: float) -> str:
    """Axis label with B/M/k suffix; raw values are never rewritten."""
    a = abs(n)
    if a >= 1_000_000_000:
        return f"{n / 1_000_000_000:.2f}B"
    if a >= 1_000_000:
        return f"{n / 1_000_000:.2f}M"
    if a >= 1_000:
        return f"{n / 1_000:.2f}k"
    return f"{n:.2f}"


def _coord(v: float) -> str:
    # integral coordinates print without ".0" so path strings stay compact
    if float(v).is_integer():
        return str(int(v))
    return repr(float(v))


def date_label(raw: Optional[str]) -> str:
    """Short month/day label ("Jan 3") for an ISO-like date token."""
    token = (raw or "").strip()
    try:
        d = _date.fromisoformat(token[:10])
    except ValueError:
        return token
    return f"{d:%b} {d.day}"


def value_range(closes: Sequence[float]) -> tuple[float, float]:
    lo, hi = min(closes), max(closes)
    pad = ((hi - lo) or 1) * RANGE_PAD
    return lo - pad, hi + pad


def x_scale(n: int, viewport: Viewport) -> Callable[[float], float]:
    p = viewport.padding
    span = viewport.width - p.left - p.right
    steps = max(1, n - 1)
    return lambda i: p.left + span * i / steps


def y_scale(y0: float, y1: float, viewport: Viewport) -> Callable[[float], float]:
    p = viewport.padding
    span = viewport.height - p.top - p.bottom
    domain = max(MIN_SPAN, y1 - y0)
    return lambda v: p.top + span * (1 - (v - y0) / domain)


def date_tick_indices(n: int, count: int = DATE_TICKS) -> List[int]:
    """Evenly spaced indices over [0, n-1], rounded and clamped; may repeat."""
    last = max(0, n - 1)
    out = []
    for i in range(count):
        raw = _round_half_up(i * (n - 1) / (count - 1))
        out.append(min(max(raw, 0), last))
    return out


def _round_half_up(v: float) -> int:
    # round() is banker's rounding; ticks round .5 up
    return math.floor(v + 0.5)


def empty_geometry(viewport: Viewport) -> ChartGeometry:
    return ChartGeometry(
        path_d="",
        area_path_d="",
        min_y=0.0,
        max_y=0.0,
        value_ticks=[],
        value_labels=[],
        date_ticks=[],
        view_box=f"0 0 {_coord(viewport.width)} {_coord(viewport.height)}",
    )


def compute_geometry(points: Sequence[PricePoint], viewport: Optional[Viewport] = None) -> ChartGeometry:
    vp = viewport or Viewport()
    if not points:
        return empty_geometry(vp)

    n = len(points)
    y0, y1 = value_range([pt.close for pt in points])
    sx = x_scale(n, vp)
    sy = y_scale(y0, y1, vp)

    segments = []
    for i, pt in enumerate(points):
        cmd = "M" if i == 0 else "L"
        segments.append(f"{cmd} {_coord(sx(i))} {_coord(sy(pt.close))}")
    path_d = " ".join(segments)

    base = _coord(vp.baseline)
    area_path_d = (
        f"{path_d} L {_coord(vp.right_edge)} {base} "
        f"L {_coord(vp.padding.left)} {base} Z"
    )

    ticks = [y0 + (y1 - y0) * i / (VALUE_TICKS - 1) for i in range(VALUE_TICKS)]
    date_ticks = [
        DateTick(x=sx(idx), label=date_label(points[idx].date))
        for idx in date_tick_indices(n)
    ]

    return ChartGeometry(
        path_d=path_d,
        area_path_d=area_path_d,
        min_y=y0,
        max_y=y1,
        value_ticks=ticks,
        value_labels=[format_number(v) for v in ticks],
        date_ticks=date_ticks,
        view_box=f"0 0 {_coord(vp.width)} {_coord(vp.height)}",
    )
