"""
Filtered and sorted views over the inventory tables.

Every function returns a new list; the records themselves are the shared,
immutable table rows.
"""

from __future__ import annotations

from typing import Iterable, List, TypeVar

from plot_inventory.data.plot_inventory import get_all_plot_inventory
from plot_inventory.data.plot_inventory_by_area import get_all_plots_by_area
from plot_inventory.inventory.aggregation import (
    calculate_inventory_summary,
    usage_rate,
)
from plot_inventory.inventory.models import (
    FULL_PLOT_SQM,
    HALF_PLOT_SQM,
    PlotByAreaItem,
    PlotInventoryItem,
    SectionUsage,
    SizeRow,
)

Record = TypeVar("Record", PlotInventoryItem, PlotByAreaItem)


# ------------------------------------------------------------
# Availability
# ------------------------------------------------------------
def get_available_plots() -> List[PlotInventoryItem]:
    return [item for item in get_all_plot_inventory() if item.remaining_count > 0]


def get_sold_out_plots() -> List[PlotInventoryItem]:
    return [item for item in get_all_plot_inventory() if item.remaining_count == 0]


def get_available_plots_by_area() -> List[PlotByAreaItem]:
    return [item for item in get_all_plots_by_area() if item.remaining_count > 0]


def get_sold_out_plots_by_area() -> List[PlotByAreaItem]:
    return [item for item in get_all_plots_by_area() if item.remaining_count == 0]


# ------------------------------------------------------------
# Sorting
# ------------------------------------------------------------
def get_inventory_sorted_by_usage_rate(ascending: bool = False) -> List[PlotInventoryItem]:
    """Highest usage first by default. Uses the unrounded rate; ties keep table order."""
    return sorted(
        get_all_plot_inventory(),
        key=lambda item: item.usage_rate,
        reverse=not ascending,
    )


def get_inventory_sorted_by_remaining(ascending: bool = False) -> List[PlotInventoryItem]:
    return sorted(
        get_all_plot_inventory(),
        key=lambda item: item.remaining_count,
        reverse=not ascending,
    )


# ------------------------------------------------------------
# Flattened views
# ------------------------------------------------------------
def get_inventory_by_sections() -> List[SectionUsage]:
    return [
        SectionUsage(
            section=item.section,
            period=item.period,
            total_count=item.total_count,
            used_count=item.used_count,
            remaining_count=item.remaining_count,
            usage_rate=usage_rate(item.used_count, item.total_count),
        )
        for item in get_all_plot_inventory()
    ]


def get_inventory_by_size() -> List[SizeRow]:
    """
    Rough remaining stock by plot size.

    Every plot is counted as a full 3.6㎡ plot; the half row is the same stock
    expressed as 1.8㎡ halves (all counts doubled). The tables do not track
    which plots were actually split.
    """
    summary = calculate_inventory_summary()

    return [
        SizeRow(
            size_type="full",
            area_sqm=FULL_PLOT_SQM,
            total_count=summary.total_count,
            used_count=summary.used_count,
            remaining_count=summary.remaining_count,
        ),
        SizeRow(
            size_type="half",
            area_sqm=HALF_PLOT_SQM,
            total_count=summary.total_count * 2,
            used_count=summary.used_count * 2,
            remaining_count=summary.remaining_count * 2,
        ),
    ]


# ------------------------------------------------------------
# Data quality
# ------------------------------------------------------------
def find_unbalanced_records(items: Iterable[Record]) -> List[Record]:
    """Records where used + remaining != total. Reported only, never corrected."""
    return [
        item for item in items
        if item.used_count + item.remaining_count != item.total_count
    ]
