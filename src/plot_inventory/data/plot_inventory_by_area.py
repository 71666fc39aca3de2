# src/plot_inventory/data/plot_inventory_by_area.py
"""
Plot inventory split by period and plot area (as of end of March 2025).

remaining_area_sqm is the recorded remaining area of the bucket and is not
derived from remaining_count * area_sqm. Rows are kept exactly as recorded.
"""

from __future__ import annotations

from typing import List, Tuple

from plot_inventory.inventory.models import PlotByAreaItem

AREA_INVENTORY_AS_OF = "2025年3月末"


# ===================================================================
# PERIOD TABLES
# ===================================================================

PERIOD_1_BY_AREA: Tuple[PlotByAreaItem, ...] = (
    PlotByAreaItem("1期", 0.5, 35, 35, 0, 0.0, "千羽鶴"),
    PlotByAreaItem("1期", 0.84, 10, 28, 2, 10.0, "墓林千羽鶴"),
    PlotByAreaItem("1期", 0.9, 30, 43, 0, 1.0, "自由"),
    PlotByAreaItem("1期", 1.3, 44, 1, 1, 0.2, "自由"),
    PlotByAreaItem("1期", 1.35, 1, 0, 0, 1.3, "自由"),
    PlotByAreaItem("1期", 1.49, 2, 2, 0, 0.0, "(社)-1"),
    PlotByAreaItem("1期", 1.5, 15, 15, 0, 0.0, "吉相"),
    PlotByAreaItem("1期", 1.6, 2, 2, 0, 0.0, "吉相"),
    PlotByAreaItem("1期", 1.7, 2, 1, 0, 0.0, "(社)-含む"),
    PlotByAreaItem("1期", 1.8, 242, 217, 25, 45.0, "自由"),
    PlotByAreaItem("1期", 2.0, 14, 13, 1, 6.48, "自由"),
    PlotByAreaItem("1期", 2.16, 5, 12, 3, 0.0, "自由"),
    PlotByAreaItem("1期", 2.25, 12, 2, 2, 4.95, "自由"),
    PlotByAreaItem("1期", 2.475, 37, 35, 0, 0.0, "(社)-含む"),
    PlotByAreaItem("1期", 2.48, 2, 24, 5, 13.5, "自由"),
    PlotByAreaItem("1期", 2.7, 29, 3, 0, 0.0, "(社)-含む"),
    PlotByAreaItem("1期", 3.0, 3, 7, 0, 0.0, "自由"),
    PlotByAreaItem("1期", 3.15, 29, 24, 0, 0.0, "自由"),
    PlotByAreaItem("1期", 3.36, 7, 7, 2, 49.0, "自由"),
    PlotByAreaItem("1期", 3.6, 833, 784, 5, 176.4, "自由"),
    PlotByAreaItem("1期", 3.69, 15, 15, 0, 0.0, "自由"),
    PlotByAreaItem("1期", 3.87, 36, 31, 0, 19.35, "自由"),
    PlotByAreaItem("1期", 4.0, 1, 1, 18, 72.9, "自由"),
    PlotByAreaItem("1期", 4.05, 293, 275, 0, 0.0, "(社)-13含む"),
    PlotByAreaItem("1期", 4.275, 9, 7, 2, 8.55, "自由"),
    PlotByAreaItem("1期", 4.5, 3, 3, 1, 4.96, "自由"),
    PlotByAreaItem("1期", 4.96, 8, 7, 0, 0.0, "自由"),
    PlotByAreaItem("1期", 5.0, 1, 4, 0, 0.0, "自由"),
    PlotByAreaItem("1期", 5.12, 4, 1, 0, 0.0, "吉相"),
    PlotByAreaItem("1期", 5.2, 1, 0, 0, 13.95, "吉相"),
    PlotByAreaItem("1期", 6.975, 2, 3, 2, 0.0, "吉相"),
    PlotByAreaItem("1期", 7.2, 3, 3, 1, 9.92, "吉相"),
    PlotByAreaItem("1期", 9.92, 2, 1, 1, 10.24, "吉相"),
    PlotByAreaItem("1期", 10.24, 4, 3, 1, 12.8, "吉相"),
    PlotByAreaItem("1期", 12.8, 3, 2, 1, 12.8, "吉相"),
)

PERIOD_2_BY_AREA: Tuple[PlotByAreaItem, ...] = (
    PlotByAreaItem("2期", 1.0, 183, 179, 4, 4.0, "墳墓"),
    PlotByAreaItem("2期", 1.8, 72, 63, 9, 16.0, "自由"),
    PlotByAreaItem("2期", 2.0, 4, 4, 0, 0.0, "自由"),
    PlotByAreaItem("2期", 2.08, 125, 125, 0, 0.0, "自由"),
    PlotByAreaItem("2期", 3.0, 158, 120, 38, 114.0, "自由"),
    PlotByAreaItem("2期", 4.0, 54, 54, 0, 0.0, "自由"),
    PlotByAreaItem("2期", 5.0, 1, 1, 0, 0.0, "自由"),
    PlotByAreaItem("2期", 6.73, 4, 4, 0, 0.0, "自由"),
    PlotByAreaItem("2期", 8.4, 1, 1, 0, 0.0, "自由"),
    PlotByAreaItem("2期", 12.0, 1, 1, 0, 0.0, "合計"),
)

PERIOD_3_BY_AREA: Tuple[PlotByAreaItem, ...] = (
    PlotByAreaItem("3期", 1.0, 123, 122, 1, 1.0, "墳墓"),
    PlotByAreaItem("3期", 1.2, 15, 15, 0, 0.0, "墳墓"),
    PlotByAreaItem("3期", 1.35, 8, 8, 0, 0.0, "墳墓"),
    PlotByAreaItem("3期", 1.44, 20, 11, 9, 13.0, "墳墓"),
    PlotByAreaItem("3期", 1.5, 12, 6, 6, 9.0, "墳墓"),
    PlotByAreaItem("3期", 1.8, 78, 62, 16, 29.0, "墳墓"),
)

# Woodland / sky plots (樹林・天空)
PERIOD_3_SPECIAL_BY_AREA: Tuple[PlotByAreaItem, ...] = (
    PlotByAreaItem("3期", 0.6, 260, 246, 14, 8.4, "樹林"),
    PlotByAreaItem("3期", 1.0, 58, 56, 2, 2.0, "天空K"),
)

PERIOD_4_BY_AREA: Tuple[PlotByAreaItem, ...] = (
    PlotByAreaItem("4期", 1.0, 104, 95, 9, 9.0, "るり庵テラス"),
    PlotByAreaItem("4期", 1.5, 185, 140, 45, 68.0, "墳墓"),
    PlotByAreaItem("4期", 2.4, 130, 79, 51, 122.0, "墳墓"),
    PlotByAreaItem("4期", 3.0, 98, 38, 60, 180.0, "墳墓"),
    PlotByAreaItem("4期", 4.0, 29, 25, 4, 16.0, "墳墓"),
    PlotByAreaItem("4期", 5.0, 8, 8, 0, 0.0, "自由"),
    PlotByAreaItem("4期", 8.4, 66, 6, 60, 0.0, "憩"),
    PlotByAreaItem("4期", 0.2, 56, 6, 50, 12.0, "恵"),
    PlotByAreaItem("4期", 0.3, 34, 3, 31, 15.0, "恵"),
    PlotByAreaItem("4期", 0.45, 64, 1, 63, 14.0, "るり庵Ⅱ"),
)

_BY_PERIOD = {
    "1期": PERIOD_1_BY_AREA,
    "2期": PERIOD_2_BY_AREA,
    "3期": PERIOD_3_BY_AREA + PERIOD_3_SPECIAL_BY_AREA,
    "4期": PERIOD_4_BY_AREA,
}


# ===================================================================
# ACCESSORS
# ===================================================================

def get_all_plots_by_area() -> List[PlotByAreaItem]:
    return [
        *PERIOD_1_BY_AREA,
        *PERIOD_2_BY_AREA,
        *PERIOD_3_BY_AREA,
        *PERIOD_3_SPECIAL_BY_AREA,
        *PERIOD_4_BY_AREA,
    ]


def get_plots_by_area_for_period(period: str) -> List[PlotByAreaItem]:
    return list(_BY_PERIOD.get(period, ()))
