# src/plot_inventory/pdf/table_builder.py

from typing import Callable, Dict, List, Optional

import pandas as pd
from reportlab.platypus import Table, TableStyle
from reportlab.lib import colors
from reportlab.lib.units import inch

from plot_inventory.inventory.status import usage_band
from plot_inventory.pdf.status_theme import BAND_THEME
from plot_inventory.pdf.styles import BRAND_GREEN, BRAND_LIGHT, JP_FONT, JP_FONT_LIGHT


# ============================================================
# INVENTORY TABLE
# ============================================================

def build_inventory_table(
    df: pd.DataFrame,
    headers: Dict[str, str],
    pagesize,
    formatters: Optional[Dict[str, Callable]] = None,
    rate_column: Optional[str] = None,
    first_col_width: float = 1.1 * inch,
    total_row: Optional[List] = None,
):
    """
    Generic inventory table from a DataFrame.

    headers maps DataFrame column -> header label (and fixes column order).
    When rate_column is given, that column is coloured by usage band.
    total_row, when given, is appended in bold.
    """
    formatters = formatters or {}
    columns = list(headers)

    # -----------------------------
    # Header + body rows
    # -----------------------------
    data = [[headers[c] for c in columns]]

    # itertuples keeps per-column dtypes
    for values in df[columns].itertuples(index=False, name=None):
        data.append([
            formatters[c](v) if c in formatters else v
            for c, v in zip(columns, values)
        ])

    if total_row is not None:
        data.append(total_row)

    num_cols = len(columns)

    # -----------------------------
    # Column widths
    # -----------------------------
    page_width, _ = pagesize
    usable_width = page_width - (1.0 * inch)
    other_col_width = (usable_width - first_col_width) / max(num_cols - 1, 1)
    col_widths = [first_col_width] + [other_col_width] * (num_cols - 1)

    table = Table(data, colWidths=col_widths, repeatRows=1)

    # -----------------------------
    # Table styling
    # -----------------------------
    style = [
        # Header
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(BRAND_GREEN)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), JP_FONT),
        ("FONTSIZE", (0, 0), (-1, 0), 8.5),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
        ("TOPPADDING", (0, 0), (-1, 0), 6),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 6),

        # Body
        ("FONTNAME", (0, 1), (-1, -1), JP_FONT_LIGHT),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),

        # Zebra striping
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor(BRAND_LIGHT)]),

        # Grid
        ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
    ]

    if total_row is not None:
        style += [
            ("FONTNAME", (0, -1), (-1, -1), JP_FONT),
            ("LINEABOVE", (0, -1), (-1, -1), 1.0, colors.HexColor(BRAND_GREEN)),
        ]

    # -----------------------------
    # Usage band colouring
    # -----------------------------
    if rate_column is not None and rate_column in columns:
        c = columns.index(rate_column)
        for r, rate in enumerate(df[rate_column].tolist(), start=1):
            theme = BAND_THEME[usage_band(float(rate))]
            style.append(("TEXTCOLOR", (c, r), (c, r), theme.text_color))

    table.setStyle(TableStyle(style))
    return table
