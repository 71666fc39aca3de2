# src/plot_inventory/data/plot_inventory.py
"""
Section-level plot inventory (as of end of June 2025).

Hand-maintained counts per period and section. Values are kept exactly as
recorded, including rows where used + remaining does not equal total.
Basic rule: 1 plot = 3.6㎡, split and sold as 1.8㎡ x 2 when needed.
"""

from __future__ import annotations

from typing import List, Tuple

from plot_inventory.inventory.models import PlotInventoryItem

INVENTORY_AS_OF = "2025年6月末"

SPECIAL_CATEGORY = "樹林・天空"


# ===================================================================
# PERIOD TABLES
# ===================================================================

PERIOD_1_INVENTORY: Tuple[PlotInventoryItem, ...] = (
    PlotInventoryItem("1期", "A", 149, 138, 11),
    PlotInventoryItem("1期", "B", 6, 6, 0),
    PlotInventoryItem("1期", "C", 136, 133, 3),
    PlotInventoryItem("1期", "吉相", 39, 31, 8),
    PlotInventoryItem("1期", "D", 99, 94, 5),
    PlotInventoryItem("1期", "E", 60, 53, 7),
    PlotInventoryItem("1期", "F", 122, 112, 10),
    PlotInventoryItem("1期", "G", 113, 108, 5),
    PlotInventoryItem("1期", "H", 119, 116, 3),
    PlotInventoryItem("1期", "I", 175, 163, 12),
    PlotInventoryItem("1期", "J", 142, 118, 24),
    PlotInventoryItem("1期", "K", 123, 106, 17),
    PlotInventoryItem("1期", "L", 71, 68, 3),
    PlotInventoryItem("1期", "M", 52, 51, 1),
    PlotInventoryItem("1期", "N", 131, 122, 9),
    PlotInventoryItem("1期", "O", 88, 83, 5),
    PlotInventoryItem("1期", "P", 86, 78, 8),
)

PERIOD_2_INVENTORY: Tuple[PlotInventoryItem, ...] = (
    PlotInventoryItem("2期", "1", 95, 93, 2),
    PlotInventoryItem("2期", "2", 125, 125, 0),
    PlotInventoryItem("2期", "3", 94, 57, 37),
    PlotInventoryItem("2期", "5", 29, 29, 0),
    PlotInventoryItem("2期", "6", 111, 107, 4),
    PlotInventoryItem("2期", "7", 86, 78, 8),
    PlotInventoryItem("2期", "8", 64, 63, 1),
)

PERIOD_3_INVENTORY: Tuple[PlotInventoryItem, ...] = (
    PlotInventoryItem("3期", "10", 133, 102, 31),
    PlotInventoryItem("3期", "11", 123, 122, 1),
)

# Woodland / sky plots (樹林・天空), listed after the standard 3期 sections
PERIOD_3_SPECIAL_INVENTORY: Tuple[PlotInventoryItem, ...] = (
    PlotInventoryItem("3期", "樹林", 260, 246, 14, SPECIAL_CATEGORY),
    PlotInventoryItem("3期", "天空K", 58, 56, 2, SPECIAL_CATEGORY),
)

PERIOD_4_INVENTORY: Tuple[PlotInventoryItem, ...] = (
    PlotInventoryItem("4期", "1", 104, 95, 9),
    PlotInventoryItem("4期", "1.5", 185, 140, 45),
    PlotInventoryItem("4期", "2.4", 130, 79, 51),
    PlotInventoryItem("4期", "3", 98, 38, 60),
    PlotInventoryItem("4期", "4", 29, 25, 4),
    PlotInventoryItem("4期", "5", 8, 8, 0),
    PlotInventoryItem("4期", "8.4", 66, 6, 60),
    PlotInventoryItem("4期", "憩", 56, 6, 50),
    PlotInventoryItem("4期", "恵", 34, 3, 31),
    PlotInventoryItem("4期", "るり庵Ⅱ", 64, 1, 63),
    PlotInventoryItem("4期", "るり庵テラス", 25, 0, 25),
)

_BY_PERIOD = {
    "1期": PERIOD_1_INVENTORY,
    "2期": PERIOD_2_INVENTORY,
    "3期": PERIOD_3_INVENTORY + PERIOD_3_SPECIAL_INVENTORY,
    "4期": PERIOD_4_INVENTORY,
}


# ===================================================================
# ACCESSORS
# ===================================================================

def get_all_plot_inventory() -> List[PlotInventoryItem]:
    """All section records in period order (3期 woodland/sky after standard 3期)."""
    return [
        *PERIOD_1_INVENTORY,
        *PERIOD_2_INVENTORY,
        *PERIOD_3_INVENTORY,
        *PERIOD_3_SPECIAL_INVENTORY,
        *PERIOD_4_INVENTORY,
    ]


def get_plot_inventory_by_period(period: str) -> List[PlotInventoryItem]:
    """Section records for one period; unknown periods give an empty list."""
    return list(_BY_PERIOD.get(period, ()))
