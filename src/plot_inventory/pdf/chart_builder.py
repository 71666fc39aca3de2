# src/plot_inventory/pdf/chart_builder.py
"""
Chart builder: used vs remaining plots per period
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from plot_inventory.inventory.models import PeriodSummary
from plot_inventory.pdf.styles import BRAND_GRAY, BRAND_GREEN


def build_period_chart(periods: Sequence[PeriodSummary], output_dir: Path) -> Path | None:
    """Stacked bar chart (used / remaining) per period, saved as PNG."""
    if not periods:
        return None

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    chart_path = output_dir / "period_usage_chart.png"

    # Period labels as "P1".."P4"; the default matplotlib font has no CJK glyphs
    labels = [f"P{p.period.rstrip('期')}" for p in periods]
    used = [p.used_count for p in periods]
    remaining = [p.remaining_count for p in periods]

    fig, ax = plt.subplots(figsize=(8, 3.6))
    ax.bar(labels, used, color=BRAND_GREEN, label="Used")
    ax.bar(labels, remaining, bottom=used, color=BRAND_GRAY, label="Remaining")

    for i, p in enumerate(periods):
        ax.annotate(
            f"{p.usage_rate:.1f}%",
            (i, p.used_count + p.remaining_count),
            ha="center",
            va="bottom",
            fontsize=9,
        )

    ax.set_ylabel("Plots", fontsize=11)
    ax.set_title("Plot Usage by Period", fontsize=13)
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()

    fig.savefig(chart_path, dpi=200, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    return chart_path
