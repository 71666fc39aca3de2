"""
pandas views of inventory records, used by the PDF tables and CSV export.
"""

from __future__ import annotations

from dataclasses import asdict, fields, is_dataclass
from pathlib import Path
from typing import Sequence

import pandas as pd

from plot_inventory.inventory.aggregation import usage_rate
from plot_inventory.inventory.models import PlotInventoryItem
from plot_inventory.inventory.status import plot_status


def records_frame(records: Sequence) -> pd.DataFrame:
    """
    One row per dataclass record, columns in field order.

    Section records gain a rounded usage_rate column and a status column
    (available / partially_sold / sold_out). Nested tuples (the
    items of a PeriodAreaSummary) are dropped.
    """
    records = list(records)
    if not records:
        return pd.DataFrame()

    first = records[0]
    if not is_dataclass(first):
        raise TypeError(f"Expected dataclass records, got {type(first).__name__}")

    columns = [f.name for f in fields(first) if f.name != "items"]
    rows = []
    for r in records:
        row = {k: v for k, v in asdict(r).items() if k in columns}
        if isinstance(r, PlotInventoryItem):
            row["usage_rate"] = usage_rate(r.used_count, r.total_count)
            row["status"] = plot_status(r).value
        rows.append(row)

    df = pd.DataFrame(rows)
    if isinstance(first, PlotInventoryItem):
        columns = columns + ["usage_rate", "status"]
    return df[columns]


def export_csv(records: Sequence, output_path) -> Path:
    """Write records to CSV (UTF-8 with BOM so spreadsheet tools read the Japanese)."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    records_frame(records).to_csv(output_path, index=False, encoding="utf-8-sig")
    return output_path
