# backend/pricechart/core/errors.py
from __future__ import annotations

from typing import Optional


class PriceHistoryError(Exception):
    """Base class for errors surfaced at the request boundary as {"error": ...}."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingParameter(PriceHistoryError):
    """Client input is missing or invalid (e.g. no symbol)."""

    status_code = 400


class UpstreamError(PriceHistoryError):
    """The upstream provider answered with a non-success status."""

    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class InternalError(PriceHistoryError):
    """Unexpected failure while fetching or parsing a series."""

    status_code = 500
