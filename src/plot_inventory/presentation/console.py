from __future__ import annotations

import io
import unicodedata
from typing import List, Optional, Sequence

from plot_inventory.data.plot_inventory_by_area import AREA_INVENTORY_AS_OF
from plot_inventory.inventory.aggregation import usage_rate
from plot_inventory.inventory.models import (
    PERIOD_LABELS,
    AreaGroup,
    PeriodSummary,
    PlotInventoryItem,
    TypeGroup,
)
from plot_inventory.inventory.status import remaining_band, usage_band
from plot_inventory.reports.formatting import fmt_number, fmt_rate, fmt_sqm
from plot_inventory.services.inventory_api import InventoryOverview


def _width(value: object) -> int:
    # Full-width (CJK) characters take two terminal columns
    return sum(2 if unicodedata.east_asian_width(ch) in ("F", "W") else 1 for ch in str(value))


def _ljust(value: object, width: int) -> str:
    text = str(value)
    return text + " " * (width - _width(text))


def _format_table(rows: Sequence[Sequence[object]], headers: List[str], max_rows: int | None = None) -> str:
    output = io.StringIO()
    rows = list(rows)

    if max_rows is not None and len(rows) > max_rows:
        shown = rows[:max_rows]
        omitted = len(rows) - max_rows
    else:
        shown = rows
        omitted = 0

    widths = [_width(h) for h in headers]
    for row in shown:
        for i, v in enumerate(row):
            widths[i] = max(widths[i], _width(v))

    def fmt(r):
        return " ".join(_ljust(r[i], widths[i]) for i in range(len(headers))).rstrip()

    print(fmt(headers), file=output)
    print(" ".join("-" * w for w in widths), file=output)
    for row in shown:
        print(fmt(row), file=output)

    if omitted:
        print(f"... ({omitted} more rows omitted) ...", file=output)

    return output.getvalue()


def _section_row(item: PlotInventoryItem) -> tuple:
    rate = usage_rate(item.used_count, item.total_count)
    status = "SOLD OUT" if item.remaining_count == 0 else usage_band(rate).value
    stock = remaining_band(item.remaining_count, item.total_count).value
    return (
        item.period,
        item.section,
        fmt_number(item.total_count),
        fmt_number(item.used_count),
        fmt_number(item.remaining_count),
        fmt_rate(rate),
        status,
        stock,
    )


def render_inventory_report(
    overview: InventoryOverview,
    periods: Sequence[PeriodSummary],
    items: Sequence[PlotInventoryItem],
    title: str = "All sections",
    area_groups: Optional[Sequence[AreaGroup]] = None,
    type_groups: Optional[Sequence[TypeGroup]] = None,
) -> str:
    """Plain-text inventory report (console + e-mail body)."""
    out = io.StringIO()

    print("=" * 80, file=out)
    print("PLOT INVENTORY REPORT", file=out)
    print("=" * 80, file=out)
    print(f"As Of: {overview.last_updated}", file=out)
    print(file=out)

    print(f"Total Plots:      {fmt_number(overview.total_count)}", file=out)
    print(f"Used Plots:       {fmt_number(overview.used_count)}", file=out)
    print(f"Remaining Plots:  {fmt_number(overview.remaining_count)}", file=out)
    print(f"Usage Rate:       {fmt_rate(overview.usage_rate)}", file=out)
    print(f"Remaining Area:   {fmt_sqm(overview.remaining_area_sqm)} (approx.)", file=out)
    print(file=out)

    print("== By Period ==\n", file=out)
    period_rows = [
        (
            PERIOD_LABELS.get(p.period, p.period),
            fmt_number(p.total_count),
            fmt_number(p.used_count),
            fmt_number(p.remaining_count),
            fmt_rate(p.usage_rate),
            usage_band(p.usage_rate).value,
        )
        for p in periods
    ]
    print(
        _format_table(period_rows, ["period", "total", "used", "remaining", "usage", "band"]),
        file=out,
    )

    print(f"== {title} ==\n", file=out)
    item_rows = [_section_row(i) for i in items]
    print(
        _format_table(
            item_rows,
            ["period", "section", "total", "used", "remaining", "usage", "status", "stock"],
            max_rows=200,
        ),
        file=out,
    )

    if area_groups is not None:
        print("== By Plot Area ==", file=out)
        print(f"Area tables as of {AREA_INVENTORY_AS_OF}\n", file=out)
        area_rows = [
            (
                fmt_sqm(g.area_sqm),
                fmt_number(g.total_count),
                fmt_number(g.used_count),
                fmt_number(g.remaining_count),
                fmt_sqm(g.remaining_area_sqm),
            )
            for g in area_groups
        ]
        print(
            _format_table(area_rows, ["area", "total", "used", "remaining", "remaining_area"]),
            file=out,
        )

    if type_groups is not None:
        print("== By Plot Type ==", file=out)
        print(f"Area tables as of {AREA_INVENTORY_AS_OF}\n", file=out)
        type_rows = [
            (
                g.plot_type,
                fmt_number(g.total_count),
                fmt_number(g.used_count),
                fmt_number(g.remaining_count),
                fmt_sqm(g.remaining_area_sqm),
            )
            for g in type_groups
        ]
        print(
            _format_table(type_rows, ["type", "total", "used", "remaining", "remaining_area"]),
            file=out,
        )

    return out.getvalue()
