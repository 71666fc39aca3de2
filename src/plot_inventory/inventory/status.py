from __future__ import annotations

from enum import Enum

from plot_inventory.inventory.models import PlotInventoryItem


class UsageBand(Enum):
    CRITICAL = "CRITICAL"   # >= 95%
    HIGH = "HIGH"           # >= 80%
    MODERATE = "MODERATE"   # >= 60%
    NORMAL = "NORMAL"


class RemainingBand(Enum):
    CRITICAL = "CRITICAL"   # <= 5% of the bucket left
    LOW = "LOW"             # <= 15%
    MODERATE = "MODERATE"   # <= 30%
    AMPLE = "AMPLE"


class PlotStatus(Enum):
    AVAILABLE = "available"
    PARTIALLY_SOLD = "partially_sold"
    SOLD_OUT = "sold_out"


def usage_band(usage_rate: float) -> UsageBand:
    if usage_rate >= 95:
        return UsageBand.CRITICAL
    if usage_rate >= 80:
        return UsageBand.HIGH
    if usage_rate >= 60:
        return UsageBand.MODERATE
    return UsageBand.NORMAL


def remaining_band(remaining_count: int, total_count: int) -> RemainingBand:
    # Empty buckets have nothing to run out of
    if total_count <= 0:
        return RemainingBand.AMPLE

    rate = remaining_count / total_count * 100
    if rate <= 5:
        return RemainingBand.CRITICAL
    if rate <= 15:
        return RemainingBand.LOW
    if rate <= 30:
        return RemainingBand.MODERATE
    return RemainingBand.AMPLE


def matches_status(status: PlotStatus, used_count: int, remaining_count: int) -> bool:
    """
    Status filter used by the sections listing.

    available      - at least one plot left
    partially_sold - some plots sold, some left
    sold_out       - nothing left
    """
    if status is PlotStatus.AVAILABLE:
        return remaining_count > 0
    if status is PlotStatus.SOLD_OUT:
        return remaining_count == 0
    return used_count > 0 and remaining_count > 0


def plot_status(item: PlotInventoryItem) -> PlotStatus:
    if item.remaining_count == 0:
        return PlotStatus.SOLD_OUT
    if item.used_count > 0:
        return PlotStatus.PARTIALLY_SOLD
    return PlotStatus.AVAILABLE
