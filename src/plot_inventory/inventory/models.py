from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


# ------------------------------------------------------------
# Periods (期)
# ------------------------------------------------------------
PERIODS: Tuple[str, ...] = ("1期", "2期", "3期", "4期")

PERIOD_LABELS = {
    "1期": "第1期",
    "2期": "第2期",
    "3期": "第3期",
    "4期": "第4期",
}

# Standard plot = 3.6㎡, sold as 1.8㎡ halves when needed
FULL_PLOT_SQM = 3.6
HALF_PLOT_SQM = 1.8


# ------------------------------------------------------------
# Leaf records
# ------------------------------------------------------------
@dataclass(frozen=True)
class PlotInventoryItem:
    """One homogeneous bucket of plots within a period/section."""

    period: str
    section: str
    total_count: int
    used_count: int
    remaining_count: int
    category: Optional[str] = None  # 樹林・天空 etc.

    @property
    def usage_rate(self) -> float:
        """Unrounded usage percentage (0 when the bucket is empty)."""
        if self.total_count > 0:
            return self.used_count / self.total_count * 100
        return 0


@dataclass(frozen=True)
class PlotByAreaItem:
    period: str
    area_sqm: float
    total_count: int
    used_count: int
    remaining_count: int
    remaining_area_sqm: float  # as recorded, not remaining_count * area_sqm
    plot_type: str


# ------------------------------------------------------------
# Section-level summaries
# ------------------------------------------------------------
@dataclass(frozen=True)
class PeriodSummary:
    period: str
    total_count: int
    used_count: int
    remaining_count: int
    usage_rate: float


@dataclass(frozen=True)
class InventorySummary:
    total_count: int
    used_count: int
    remaining_count: int
    usage_rate: float
    last_updated: str


@dataclass(frozen=True)
class SectionUsage:
    section: str
    period: str
    total_count: int
    used_count: int
    remaining_count: int
    usage_rate: float


@dataclass(frozen=True)
class SizeRow:
    size_type: str  # "full" | "half"
    area_sqm: float
    total_count: int
    used_count: int
    remaining_count: int


# ------------------------------------------------------------
# Area-level summaries
# ------------------------------------------------------------
@dataclass(frozen=True)
class PeriodAreaSummary:
    period: str
    total_count: int
    used_count: int
    remaining_count: int
    total_area_sqm: float
    remaining_area_sqm: float
    items: Tuple[PlotByAreaItem, ...]


@dataclass(frozen=True)
class AreaSummary:
    total_count: int
    used_count: int
    remaining_count: int
    total_area_sqm: float
    remaining_area_sqm: float


@dataclass(frozen=True)
class AreaGroup:
    area_sqm: float
    total_count: int
    used_count: int
    remaining_count: int
    remaining_area_sqm: float


@dataclass(frozen=True)
class TypeGroup:
    plot_type: str
    total_count: int
    used_count: int
    remaining_count: int
    remaining_area_sqm: float
