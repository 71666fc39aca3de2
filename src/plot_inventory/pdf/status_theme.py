from dataclasses import dataclass

from reportlab.lib import colors

from plot_inventory.inventory.status import UsageBand
from plot_inventory.pdf.styles import STATUS_GREEN, STATUS_ORANGE, STATUS_RED, STATUS_YELLOW


@dataclass(frozen=True)
class BandStyle:
    band: UsageBand
    label: str
    text_color: object      # ReportLab color
    legend_color: str       # HTML color


BAND_THEME = {
    UsageBand.CRITICAL: BandStyle(
        band=UsageBand.CRITICAL,
        label="95%以上",
        text_color=colors.HexColor(STATUS_RED),
        legend_color=STATUS_RED,
    ),
    UsageBand.HIGH: BandStyle(
        band=UsageBand.HIGH,
        label="80%以上",
        text_color=colors.HexColor(STATUS_ORANGE),
        legend_color=STATUS_ORANGE,
    ),
    UsageBand.MODERATE: BandStyle(
        band=UsageBand.MODERATE,
        label="60%以上",
        text_color=colors.HexColor(STATUS_YELLOW),
        legend_color=STATUS_YELLOW,
    ),
    UsageBand.NORMAL: BandStyle(
        band=UsageBand.NORMAL,
        label="60%未満",
        text_color=colors.HexColor(STATUS_GREEN),
        legend_color=STATUS_GREEN,
    ),
}
