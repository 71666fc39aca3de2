"""
Plot inventory aggregation.

Folds the leaf inventory tables into period, overall, area and type
summaries. Raw fields are summed as stored: remaining counts and remaining
areas are never recomputed from totals, so recording discrepancies in the
source tables carry through to every summary unchanged.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List

from plot_inventory.data.plot_inventory import (
    INVENTORY_AS_OF,
    get_all_plot_inventory,
    get_plot_inventory_by_period,
)
from plot_inventory.data.plot_inventory_by_area import (
    get_all_plots_by_area,
    get_plots_by_area_for_period,
)
from plot_inventory.inventory.models import (
    PERIODS,
    AreaGroup,
    AreaSummary,
    InventorySummary,
    PeriodAreaSummary,
    PeriodSummary,
    PlotByAreaItem,
    PlotInventoryItem,
    TypeGroup,
)


def usage_rate(used_count: int, total_count: int) -> float:
    """
    Usage percentage rounded half-up to one decimal place.

    Computed as floor(used / total * 100 * 10 + 0.5) / 10 with the float
    operations in exactly that order; published figures depend on it.
    Python's round() (half-to-even) must not be used here.
    """
    if total_count > 0:
        return math.floor(used_count / total_count * 100 * 10 + 0.5) / 10
    return 0


def area_key(area_sqm: float) -> int:
    """Fixed-point grouping key (thousandths of a ㎡) for a stored plot area."""
    return int(round(area_sqm * 1000))


# ------------------------------------------------------------
# Section granularity
# ------------------------------------------------------------
def build_period_summary(period: str, items: Iterable[PlotInventoryItem]) -> PeriodSummary:
    total_count = 0
    used_count = 0
    remaining_count = 0

    for item in items:
        total_count += item.total_count
        used_count += item.used_count
        remaining_count += item.remaining_count

    return PeriodSummary(
        period=period,
        total_count=total_count,
        used_count=used_count,
        remaining_count=remaining_count,
        usage_rate=usage_rate(used_count, total_count),
    )


def calculate_period_summary(period: str) -> PeriodSummary:
    return build_period_summary(period, get_plot_inventory_by_period(period))


def calculate_all_period_summaries() -> List[PeriodSummary]:
    """One summary per period, always in 1期..4期 order."""
    return [calculate_period_summary(period) for period in PERIODS]


def calculate_inventory_summary() -> InventorySummary:
    overall = build_period_summary("", get_all_plot_inventory())

    return InventorySummary(
        total_count=overall.total_count,
        used_count=overall.used_count,
        remaining_count=overall.remaining_count,
        usage_rate=overall.usage_rate,
        last_updated=INVENTORY_AS_OF,
    )


# ------------------------------------------------------------
# Area granularity
# ------------------------------------------------------------
def build_area_summary(items: Iterable[PlotByAreaItem]) -> AreaSummary:
    total_count = 0
    used_count = 0
    remaining_count = 0
    total_area_sqm = 0
    remaining_area_sqm = 0

    for item in items:
        total_count += item.total_count
        used_count += item.used_count
        remaining_count += item.remaining_count
        total_area_sqm += item.total_count * item.area_sqm
        remaining_area_sqm += item.remaining_area_sqm

    return AreaSummary(
        total_count=total_count,
        used_count=used_count,
        remaining_count=remaining_count,
        total_area_sqm=total_area_sqm,
        remaining_area_sqm=remaining_area_sqm,
    )


def build_period_area_summary(period: str, items: Iterable[PlotByAreaItem]) -> PeriodAreaSummary:
    items = tuple(items)
    totals = build_area_summary(items)

    return PeriodAreaSummary(
        period=period,
        total_count=totals.total_count,
        used_count=totals.used_count,
        remaining_count=totals.remaining_count,
        total_area_sqm=totals.total_area_sqm,
        remaining_area_sqm=totals.remaining_area_sqm,
        items=items,
    )


def calculate_period_area_summary(period: str) -> PeriodAreaSummary:
    return build_period_area_summary(period, get_plots_by_area_for_period(period))


def calculate_all_period_area_summaries() -> List[PeriodAreaSummary]:
    return [calculate_period_area_summary(period) for period in PERIODS]


def calculate_total_area_summary() -> AreaSummary:
    return build_area_summary(get_all_plots_by_area())


# ------------------------------------------------------------
# Groupings
# ------------------------------------------------------------
def _accumulate(groups: Dict, key, item: PlotByAreaItem) -> None:
    if key not in groups:
        groups[key] = {
            "total_count": 0,
            "used_count": 0,
            "remaining_count": 0,
            "remaining_area_sqm": 0,
        }

    g = groups[key]
    g["total_count"] += item.total_count
    g["used_count"] += item.used_count
    g["remaining_count"] += item.remaining_count
    g["remaining_area_sqm"] += item.remaining_area_sqm


def get_inventory_grouped_by_area() -> List[AreaGroup]:
    """Area records grouped by plot size, smallest area first."""
    groups: Dict[int, Dict[str, float]] = {}
    areas: Dict[int, float] = {}

    for item in get_all_plots_by_area():
        key = area_key(item.area_sqm)
        areas.setdefault(key, item.area_sqm)
        _accumulate(groups, key, item)

    results = [
        AreaGroup(
            area_sqm=areas[key],
            total_count=g["total_count"],
            used_count=g["used_count"],
            remaining_count=g["remaining_count"],
            remaining_area_sqm=g["remaining_area_sqm"],
        )
        for key, g in groups.items()
    ]

    return sorted(results, key=lambda r: r.area_sqm)


def get_inventory_grouped_by_type() -> List[TypeGroup]:
    """Area records grouped by plot type, most remaining plots first."""
    groups: Dict[str, Dict[str, float]] = {}

    for item in get_all_plots_by_area():
        _accumulate(groups, item.plot_type, item)

    results = [
        TypeGroup(
            plot_type=plot_type,
            total_count=g["total_count"],
            used_count=g["used_count"],
            remaining_count=g["remaining_count"],
            remaining_area_sqm=g["remaining_area_sqm"],
        )
        for plot_type, g in groups.items()
    ]

    return sorted(results, key=lambda r: r.remaining_count, reverse=True)
