# src/plot_inventory/pdf/styles.py
"""
Shared styling for plot inventory PDFs
"""
from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont

# Built-in Japanese CID fonts (no font files needed)
JP_FONT = "HeiseiKakuGo-W5"
JP_FONT_LIGHT = "HeiseiMin-W3"

pdfmetrics.registerFont(UnicodeCIDFont(JP_FONT))
pdfmetrics.registerFont(UnicodeCIDFont(JP_FONT_LIGHT))

BRAND_GREEN = "#2E5E4E"    # Header bar / table headers
BRAND_GRAY = "#A7A9AC"     # Footer rule and text
BRAND_LIGHT = "#F4F7F5"    # Table zebra

STATUS_GREEN = "#2E7D32"
STATUS_YELLOW = "#F9A825"
STATUS_ORANGE = "#EF6C00"
STATUS_RED = "#C62828"

REPORT_TITLE = ParagraphStyle('ReportTitle', fontName=JP_FONT, fontSize=18, leading=24, alignment=TA_CENTER, textColor=colors.HexColor(BRAND_GREEN))
SECTION_HEADER = ParagraphStyle('SectionHeader', fontName=JP_FONT, fontSize=13, leading=18, alignment=TA_LEFT, textColor=colors.HexColor(BRAND_GREEN), spaceBefore=18, spaceAfter=8)
BODY_TEXT = ParagraphStyle('BodyText', fontName=JP_FONT_LIGHT, fontSize=9.5, leading=13)
