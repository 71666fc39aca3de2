import argparse
import json
from datetime import date
from pathlib import Path
from typing import List, Optional

from plot_inventory.data.plot_inventory import get_all_plot_inventory, get_plot_inventory_by_period
from plot_inventory.data.plot_inventory_by_area import get_all_plots_by_area
from plot_inventory.inventory.aggregation import (
    get_inventory_grouped_by_area,
    get_inventory_grouped_by_type,
)
from plot_inventory.inventory.models import PERIODS, PlotInventoryItem
from plot_inventory.inventory.queries import (
    find_unbalanced_records,
    get_available_plots,
    get_inventory_sorted_by_remaining,
    get_inventory_sorted_by_usage_rate,
    get_sold_out_plots,
)
from plot_inventory.presentation.console import render_inventory_report
from plot_inventory.presentation.email import send_inventory_email
from plot_inventory.presentation.frames import export_csv
from plot_inventory.reports.inventory_report import run_inventory_pdf
from plot_inventory.inventory.status import PlotStatus
from plot_inventory.services.api_client import should_use_mock_data
from plot_inventory.services.inventory_api import (
    SectionQuery,
    get_inventory_periods,
    get_inventory_sections,
    get_inventory_summary,
    to_api_dict,
)
from plot_inventory.utils.config import config
from plot_inventory.utils.file_utils import cleanup_old_files
from plot_inventory.utils.logger import get_logger, set_console_level

log = get_logger(__name__)

VIEWS = ("all", "available", "soldout", "usage-rate", "remaining")

VIEW_TITLES = {
    "all": "All sections",
    "available": "Sections with plots remaining",
    "soldout": "Sold-out sections",
    "usage-rate": "Sections by usage rate",
    "remaining": "Sections by remaining plots",
}

# Backend filter / sort for each view
REMOTE_VIEWS = {
    "all": {},
    "available": {"status": PlotStatus.AVAILABLE},
    "soldout": {"status": PlotStatus.SOLD_OUT},
    "usage-rate": {"sort_by": "usage_rate"},
    "remaining": {"sort_by": "remaining_count"},
}

REMOTE_PAGE_SIZE = 100


def fetch_remote_items(
    view: str,
    period: Optional[str] = None,
    ascending: bool = False,
    client=None,
) -> List[PlotInventoryItem]:
    """Section rows for one view, read page by page from the inventory backend."""
    options = dict(REMOTE_VIEWS[view])
    if "sort_by" in options:
        options["sort_order"] = "asc" if ascending else "desc"

    items = []
    page = 1
    while True:
        query = SectionQuery(period=period, page=page, limit=REMOTE_PAGE_SIZE, **options)
        result = get_inventory_sections(query, client=client).unwrap()
        items.extend(
            PlotInventoryItem(
                i.period, i.section, i.total_count, i.used_count, i.remaining_count, i.category
            )
            for i in result.items
        )
        if page >= result.pagination.total_pages:
            return items
        page += 1


def select_items(
    view: str,
    period: Optional[str] = None,
    ascending: bool = False,
    client=None,
) -> List[PlotInventoryItem]:
    """Section rows for one view of the inventory list, optionally narrowed to a period."""
    if view not in VIEWS:
        raise ValueError(f"Unknown view: {view!r}")

    if not should_use_mock_data():
        return fetch_remote_items(view, period, ascending, client=client)

    if view == "all":
        return get_plot_inventory_by_period(period) if period else get_all_plot_inventory()

    if view == "available":
        items = get_available_plots()
    elif view == "soldout":
        items = get_sold_out_plots()
    elif view == "usage-rate":
        items = get_inventory_sorted_by_usage_rate(ascending)
    else:
        items = get_inventory_sorted_by_remaining(ascending)

    return [i for i in items if period is None or i.period == period]


def write_snapshot(overview, periods, items, output_path) -> Path:
    """Dump the report figures as camelCase JSON, in the shape the backend serves."""
    payload = {
        "summary": to_api_dict(overview),
        "periods": [to_api_dict(p) for p in periods],
        "sections": [to_api_dict(i) for i in items],
    }
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return output_path


def audit_inventory() -> int:
    """Log every row whose used + remaining does not add up to total."""
    count = 0
    for item in find_unbalanced_records(get_all_plot_inventory()):
        log.warning(
            "Unbalanced section row | period=%s section=%s total=%d used=%d remaining=%d",
            item.period, item.section, item.total_count, item.used_count, item.remaining_count,
        )
        count += 1
    for item in find_unbalanced_records(get_all_plots_by_area()):
        log.warning(
            "Unbalanced area row | period=%s area=%s type=%s total=%d used=%d remaining=%d",
            item.period, item.area_sqm, item.plot_type,
            item.total_count, item.used_count, item.remaining_count,
        )
        count += 1
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cemetery plot inventory report"
    )

    parser.add_argument(
        "--view",
        choices=VIEWS,
        default="all",
        help="Which section listing to show (default: all).",
    )

    parser.add_argument(
        "--period",
        choices=PERIODS,
        default=None,
        help="Limit the section listing to one period.",
    )

    parser.add_argument(
        "--ascending",
        action="store_true",
        help="Sort usage-rate / remaining views lowest first.",
    )

    parser.add_argument(
        "--by-area",
        action="store_true",
        help="Append plot-area and plot-type groupings.",
    )

    parser.add_argument(
        "--audit",
        action="store_true",
        help="Warn about rows where used + remaining != total.",
    )

    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write the section listing to this CSV file.",
    )

    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help="Write summary, periods and the section listing to this JSON file.",
    )

    parser.add_argument(
        "--pdf",
        type=str,
        nargs="?",
        const="",
        default=None,
        help="Write the PDF report (to OUTPUT_DIR when no path is given).",
    )

    parser.add_argument(
        "--email",
        action="store_true",
        help="Send the report via email.",
    )

    parser.add_argument(
        "--to",
        type=str,
        default=None,
        help="Comma-separated recipients. If omitted, uses DEFAULT_RECIPIENTS.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show INFO log messages on the console.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_console_level("INFO")

    overview = get_inventory_summary().unwrap()
    periods = get_inventory_periods().unwrap()
    items = select_items(args.view, args.period, args.ascending)

    title = VIEW_TITLES[args.view]
    if args.period:
        title = f"{title} ({args.period})"

    report_text = render_inventory_report(
        overview,
        periods,
        items,
        title=title,
        area_groups=get_inventory_grouped_by_area() if args.by_area else None,
        type_groups=get_inventory_grouped_by_type() if args.by_area else None,
    )

    print(report_text, end="")

    if args.audit:
        unbalanced = audit_inventory()
        print(f"Unbalanced rows: {unbalanced}")

    if args.csv:
        path = export_csv(items, args.csv)
        print(f"CSV written: {path}")

    if args.json:
        path = write_snapshot(overview, periods, items, args.json)
        print(f"JSON written: {path}")

    if args.pdf is not None:
        if args.pdf:
            path = run_inventory_pdf(args.pdf, period=args.period)
        else:
            filename = f"Plot_Inventory_{date.today().isoformat()}.pdf"
            path = run_inventory_pdf(config.OUTPUT_DIR / filename, period=args.period)
            cleanup_old_files(config.OUTPUT_DIR)
        print(f"PDF written: {path}")

    if args.email:
        recipients = (
            [e.strip() for e in args.to.split(",") if e.strip()]
            if args.to
            else config.DEFAULT_RECIPIENTS
        )
        if not recipients:
            raise ValueError(
                "Recipients not provided. Supply --to or set DEFAULT_RECIPIENTS in environment."
            )
        send_inventory_email(report_text, recipients)


if __name__ == "__main__":
    main()
