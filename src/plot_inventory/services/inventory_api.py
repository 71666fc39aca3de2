"""
Plot inventory API.

Answers inventory requests either from the bundled tables (mock mode) or from
the inventory backend, depending on config.USE_MOCK_DATA. Both paths return
the same dataclasses; the backend speaks camelCase JSON.

Endpoints:
- GET /plots/inventory/summary
- GET /plots/inventory/periods
- GET /plots/inventory/sections
- GET /plots/inventory/areas
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Generic, List, Optional, TypeVar

import httpx

from plot_inventory.data.plot_inventory import (
    get_all_plot_inventory,
    get_plot_inventory_by_period,
)
from plot_inventory.data.plot_inventory_by_area import (
    get_all_plots_by_area,
    get_plots_by_area_for_period,
)
from plot_inventory.inventory.aggregation import (
    calculate_all_period_summaries,
    calculate_inventory_summary,
    usage_rate,
)
from plot_inventory.inventory.models import (
    FULL_PLOT_SQM,
    PeriodSummary,
    PlotByAreaItem,
    PlotInventoryItem,
)
from plot_inventory.inventory.status import PlotStatus, matches_status
from plot_inventory.services.api_client import (
    INVALID_RESPONSE_MESSAGE,
    ApiResponse,
    api_get,
    should_use_mock_data,
)
from plot_inventory.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

SECTION_SORT_KEYS = ("period", "section", "total_count", "used_count", "remaining_count", "usage_rate")
AREA_SORT_KEYS = (
    "period",
    "area_sqm",
    "total_count",
    "used_count",
    "remaining_count",
    "remaining_area_sqm",
    "plot_type",
)
SORT_ORDERS = ("asc", "desc")


# ============================================================
# Wire conversion (snake_case <-> camelCase)
# ============================================================

def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_api_dict(obj) -> Dict[str, Any]:
    return {_camel(f.name): getattr(obj, f.name) for f in fields(obj)}


def from_api_dict(cls, payload: Dict[str, Any]):
    values = {}
    for f in fields(cls):
        key = _camel(f.name)
        if key in payload:
            values[f.name] = payload[key]
    return cls(**values)


# ============================================================
# Response types
# ============================================================

@dataclass(frozen=True)
class InventoryOverview:
    total_count: int
    used_count: int
    remaining_count: int
    usage_rate: float
    total_area_sqm: float
    remaining_area_sqm: float
    last_updated: str


@dataclass(frozen=True)
class SectionInventoryItem:
    period: str
    section: str
    total_count: int
    used_count: int
    remaining_count: int
    usage_rate: float
    category: Optional[str] = None


@dataclass(frozen=True)
class AreaInventoryItem:
    period: str
    area_sqm: float
    total_count: int
    used_count: int
    remaining_count: int
    remaining_area_sqm: float
    plot_type: str


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    pagination: Pagination


# ============================================================
# Query parameters
# ============================================================

def _check_paging(sort_by: str, allowed, sort_order: str, page: int, limit: int) -> None:
    if sort_by not in allowed:
        raise ValueError(f"Unsupported sort key: {sort_by!r} (expected one of {', '.join(allowed)})")
    if sort_order not in SORT_ORDERS:
        raise ValueError(f"Unsupported sort order: {sort_order!r}")
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")


@dataclass(frozen=True)
class SectionQuery:
    period: Optional[str] = None
    status: Optional[PlotStatus] = None
    search: Optional[str] = None
    sort_by: str = "period"
    sort_order: str = "asc"
    page: int = 1
    limit: int = 100

    def __post_init__(self):
        if isinstance(self.status, str):
            object.__setattr__(self, "status", PlotStatus(self.status))
        _check_paging(self.sort_by, SECTION_SORT_KEYS, self.sort_order, self.page, self.limit)

    def to_params(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "sortBy": _camel(self.sort_by),
            "sortOrder": self.sort_order,
            "period": self.period,
            "status": self.status.value if self.status else None,
            "search": self.search,
        }


@dataclass(frozen=True)
class AreaQuery:
    period: Optional[str] = None
    search: Optional[str] = None
    sort_by: str = "period"
    sort_order: str = "asc"
    page: int = 1
    limit: int = 100

    def __post_init__(self):
        _check_paging(self.sort_by, AREA_SORT_KEYS, self.sort_order, self.page, self.limit)

    def to_params(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "sortBy": _camel(self.sort_by),
            "sortOrder": self.sort_order,
            "period": self.period,
            "search": self.search,
        }


# ============================================================
# Mock conversions
# ============================================================

def _overview_from_tables() -> InventoryOverview:
    # Area is approximated at one standard plot (3.6㎡) per plot
    s = calculate_inventory_summary()
    return InventoryOverview(
        total_count=s.total_count,
        used_count=s.used_count,
        remaining_count=s.remaining_count,
        usage_rate=s.usage_rate,
        total_area_sqm=s.total_count * FULL_PLOT_SQM,
        remaining_area_sqm=s.remaining_count * FULL_PLOT_SQM,
        last_updated=s.last_updated,
    )


def _section_item(item: PlotInventoryItem) -> SectionInventoryItem:
    return SectionInventoryItem(
        period=item.period,
        section=item.section,
        total_count=item.total_count,
        used_count=item.used_count,
        remaining_count=item.remaining_count,
        usage_rate=usage_rate(item.used_count, item.total_count),
        category=item.category,
    )


def _area_item(item: PlotByAreaItem) -> AreaInventoryItem:
    return AreaInventoryItem(
        period=item.period,
        area_sqm=item.area_sqm,
        total_count=item.total_count,
        used_count=item.used_count,
        remaining_count=item.remaining_count,
        remaining_area_sqm=item.remaining_area_sqm,
        plot_type=item.plot_type,
    )


def _paginate(items: list, page: int, limit: int) -> Page:
    total = len(items)
    start = (page - 1) * limit
    return Page(
        items=items[start:start + limit],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        ),
    )


def _page_from_api(payload: Dict[str, Any], item_cls, page: int, limit: int) -> Page:
    items = [from_api_dict(item_cls, row) for row in payload.get("items", [])]
    p = payload.get("pagination")
    if p is None:
        # Unpaged reply: treat the items as the whole result
        return Page(
            items=items,
            pagination=Pagination(page, limit, len(items), math.ceil(len(items) / limit)),
        )
    return Page(items=items, pagination=from_api_dict(Pagination, p))


def _decode(resp: ApiResponse, convert) -> ApiResponse:
    """Convert a backend payload; a payload of the wrong shape becomes INVALID_RESPONSE."""
    if not resp.success:
        return resp
    try:
        return ApiResponse.ok(convert(resp.data))
    except (TypeError, AttributeError) as e:
        logger.error("Malformed inventory payload | error=%s", e)
        return ApiResponse.fail("INVALID_RESPONSE", INVALID_RESPONSE_MESSAGE)


def _sorted(items: list, sort_by: str, sort_order: str) -> list:
    return sorted(items, key=lambda i: getattr(i, sort_by), reverse=(sort_order == "desc"))


# ============================================================
# API functions
# ============================================================

def get_inventory_summary(client: Optional[httpx.Client] = None) -> ApiResponse[InventoryOverview]:
    """Overall inventory summary."""
    if should_use_mock_data():
        return ApiResponse.ok(_overview_from_tables())

    resp = api_get("/plots/inventory/summary", client=client)
    return _decode(resp, lambda data: from_api_dict(InventoryOverview, data))


def get_inventory_periods(
    period: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> ApiResponse[List[PeriodSummary]]:
    """Per-period summaries, optionally narrowed to one period."""
    if should_use_mock_data():
        periods = calculate_all_period_summaries()
        if period:
            periods = [p for p in periods if p.period == period]
        return ApiResponse.ok(periods)

    resp = api_get("/plots/inventory/periods", {"period": period}, client=client)
    return _decode(resp, lambda data: [
        from_api_dict(PeriodSummary, row) for row in data.get("periods", [])
    ])


def get_inventory_sections(
    query: Optional[SectionQuery] = None,
    client: Optional[httpx.Client] = None,
) -> ApiResponse[Page[SectionInventoryItem]]:
    """Section listing with status / search filters, sorting and paging."""
    q = query or SectionQuery()

    if not should_use_mock_data():
        resp = api_get("/plots/inventory/sections", q.to_params(), client=client)
        return _decode(resp, lambda data: _page_from_api(data, SectionInventoryItem, q.page, q.limit))

    source = get_plot_inventory_by_period(q.period) if q.period else get_all_plot_inventory()
    items = [_section_item(i) for i in source]

    if q.status is not None:
        items = [i for i in items if matches_status(q.status, i.used_count, i.remaining_count)]

    if q.search:
        needle = q.search.lower()
        items = [
            i for i in items
            if needle in i.period.lower()
            or needle in i.section.lower()
            or (i.category and needle in i.category.lower())
        ]

    items = _sorted(items, q.sort_by, q.sort_order)
    logger.debug("sections | period=%s status=%s matched=%d", q.period, q.status, len(items))

    return ApiResponse.ok(_paginate(items, q.page, q.limit))


def get_inventory_areas(
    query: Optional[AreaQuery] = None,
    client: Optional[httpx.Client] = None,
) -> ApiResponse[Page[AreaInventoryItem]]:
    """Area-size listing with search, sorting and paging."""
    q = query or AreaQuery()

    if not should_use_mock_data():
        resp = api_get("/plots/inventory/areas", q.to_params(), client=client)
        return _decode(resp, lambda data: _page_from_api(data, AreaInventoryItem, q.page, q.limit))

    source = get_plots_by_area_for_period(q.period) if q.period else get_all_plots_by_area()
    items = [_area_item(i) for i in source]

    if q.search:
        needle = q.search.lower()
        items = [
            i for i in items
            if needle in i.period.lower()
            or needle in i.plot_type.lower()
            or needle in _area_text(i.area_sqm)
        ]

    items = _sorted(items, q.sort_by, q.sort_order)
    logger.debug("areas | period=%s matched=%d", q.period, len(items))

    return ApiResponse.ok(_paginate(items, q.page, q.limit))


def _area_text(area_sqm: float) -> str:
    # 2.0 is searched as "2"
    return f"{area_sqm:g}" if float(area_sqm).is_integer() else repr(float(area_sqm))
