# src/plot_inventory/reports/inventory_report.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import inch
from reportlab.platypus import Image, PageBreak, Paragraph, Spacer

from plot_inventory.data.plot_inventory import get_all_plot_inventory, get_plot_inventory_by_period
from plot_inventory.data.plot_inventory_by_area import AREA_INVENTORY_AS_OF
from plot_inventory.inventory.aggregation import (
    calculate_all_period_summaries,
    calculate_inventory_summary,
    get_inventory_grouped_by_area,
    get_inventory_grouped_by_type,
)
from plot_inventory.inventory.models import PERIOD_LABELS
from plot_inventory.pdf.builder import build_pdf
from plot_inventory.pdf.chart_builder import build_period_chart
from plot_inventory.pdf.status_theme import BAND_THEME
from plot_inventory.pdf.styles import BODY_TEXT, REPORT_TITLE, SECTION_HEADER
from plot_inventory.pdf.table_builder import build_inventory_table
from plot_inventory.presentation.frames import records_frame
from plot_inventory.reports.formatting import fmt_number, fmt_rate, fmt_sqm
from plot_inventory.utils.logger import get_logger

logger = get_logger(__name__)

REPORT_TITLE_TEXT = "区画在庫レポート"

COUNT_HEADERS = {
    "total_count": "区画数",
    "used_count": "使用数",
    "remaining_count": "残数",
}


def _legend() -> Paragraph:
    parts = [
        f'<font color="{s.legend_color}">●</font> {s.label}'
        for s in BAND_THEME.values()
    ]
    return Paragraph("使用率: " + "　".join(parts), BODY_TEXT)


def build_inventory_elements(period: Optional[str] = None, chart_dir: Optional[Path] = None) -> list:
    """
    Flowables for the inventory report: overall summary, usage chart, period
    table, section table (all periods or one) and area / type groupings.
    """
    summary = calculate_inventory_summary()
    periods = calculate_all_period_summaries()
    sections = get_plot_inventory_by_period(period) if period else get_all_plot_inventory()

    elements = []

    # ======================
    # HEADER + SUMMARY
    # ======================
    elements.append(Paragraph(REPORT_TITLE_TEXT, REPORT_TITLE))
    elements.append(Spacer(1, 10))
    elements.append(
        Paragraph(
            f"総区画数 {fmt_number(summary.total_count)}　"
            f"使用済 {fmt_number(summary.used_count)}　"
            f"残区画 {fmt_number(summary.remaining_count)}　"
            f"使用率 {fmt_rate(summary.usage_rate)}",
            BODY_TEXT,
        )
    )
    elements.append(Spacer(1, 6))
    elements.append(_legend())

    if chart_dir is not None:
        chart_path = build_period_chart(periods, chart_dir)
        if chart_path is not None:
            elements.append(Spacer(1, 10))
            elements.append(Image(str(chart_path), width=7.0 * inch, height=3.15 * inch))

    # ======================
    # BY PERIOD
    # ======================
    elements.append(Paragraph("期別集計", SECTION_HEADER))
    period_df = records_frame(periods)
    period_df["period"] = period_df["period"].map(lambda p: PERIOD_LABELS.get(p, p))
    elements.append(
        build_inventory_table(
            period_df,
            headers={"period": "期", **COUNT_HEADERS, "usage_rate": "使用率"},
            pagesize=A4,
            formatters={"usage_rate": fmt_rate},
            rate_column="usage_rate",
            total_row=[
                "合計",
                summary.total_count,
                summary.used_count,
                summary.remaining_count,
                fmt_rate(summary.usage_rate),
            ],
        )
    )

    # ======================
    # BY SECTION
    # ======================
    title = f"区画別一覧（{PERIOD_LABELS.get(period, period)}）" if period else "区画別一覧"
    elements.append(Paragraph(title, SECTION_HEADER))
    if sections:
        elements.append(
            build_inventory_table(
                records_frame(sections),
                headers={"period": "期", "section": "区画", **COUNT_HEADERS, "usage_rate": "使用率"},
                pagesize=A4,
                formatters={"usage_rate": fmt_rate},
                rate_column="usage_rate",
                first_col_width=0.8 * inch,
            )
        )
    else:
        elements.append(Paragraph("該当する区画はありません。", BODY_TEXT))

    elements.append(PageBreak())

    # ======================
    # BY AREA / TYPE
    # ======================
    area_headers = {
        "area_sqm": "面積",
        **COUNT_HEADERS,
        "remaining_area_sqm": "残㎡",
    }
    elements.append(Paragraph(f"面積別集計（{AREA_INVENTORY_AS_OF}現在）", SECTION_HEADER))
    elements.append(
        build_inventory_table(
            records_frame(get_inventory_grouped_by_area()),
            headers=area_headers,
            pagesize=A4,
            formatters={"area_sqm": fmt_sqm, "remaining_area_sqm": fmt_sqm},
        )
    )

    elements.append(Paragraph(f"タイプ別集計（{AREA_INVENTORY_AS_OF}現在）", SECTION_HEADER))
    elements.append(
        build_inventory_table(
            records_frame(get_inventory_grouped_by_type()),
            headers={"plot_type": "タイプ", **COUNT_HEADERS, "remaining_area_sqm": "残㎡"},
            pagesize=A4,
            formatters={"remaining_area_sqm": fmt_sqm},
            first_col_width=1.6 * inch,
        )
    )

    return elements


def run_inventory_pdf(output_path, period: Optional[str] = None) -> Path:
    """Build the inventory PDF; the usage chart PNG is written next to it."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    summary = calculate_inventory_summary()
    elements = build_inventory_elements(period=period, chart_dir=output_path.parent)

    build_pdf(
        output_path=str(output_path),
        elements=elements,
        report_title=REPORT_TITLE_TEXT,
        report_date=f"{summary.last_updated}現在",
    )

    logger.info("Inventory PDF written | path=%s period=%s", output_path, period or "all")
    return output_path
