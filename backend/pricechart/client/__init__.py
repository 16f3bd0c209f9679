from .dashboard import (
    RANGE_PRESETS,
    DashboardController,
    PriceHistoryClient,
    PriceHistoryClientError,
)

__all__ = [
    "RANGE_PRESETS",
    "DashboardController",
    "PriceHistoryClient",
    "PriceHistoryClientError",
]
