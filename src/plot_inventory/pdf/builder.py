# src/plot_inventory/pdf/builder.py

from functools import partial

from reportlab.platypus import SimpleDocTemplate
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import inch
from reportlab.lib import colors

from plot_inventory.pdf.styles import BRAND_GRAY, BRAND_GREEN, JP_FONT


# ============================================================
# HEADER / FOOTER
# ============================================================

def draw_header_footer(canvas, doc, report_title, report_date):
    canvas.saveState()
    width, height = doc.pagesize

    # Header bar
    canvas.setFillColor(colors.HexColor(BRAND_GREEN))
    canvas.rect(0, height - 0.9 * inch, width, 0.9 * inch, fill=1, stroke=0)

    # Title
    canvas.setFont(JP_FONT, 15)
    canvas.setFillColor(colors.white)
    canvas.drawString(0.5 * inch, height - 0.52 * inch, report_title)

    # As-of label
    canvas.setFont(JP_FONT, 10)
    canvas.drawRightString(width - 0.5 * inch, height - 0.52 * inch, report_date)

    # Footer rule
    canvas.setStrokeColor(colors.HexColor(BRAND_GRAY))
    canvas.line(0.5 * inch, 0.75 * inch, width - 0.5 * inch, 0.75 * inch)

    # Footer text
    canvas.setFont(JP_FONT, 8)
    canvas.setFillColor(colors.HexColor(BRAND_GRAY))
    canvas.drawString(0.5 * inch, 0.5 * inch, "社外秘 - 霊園管理事務所内部資料")
    canvas.drawRightString(width - 0.5 * inch, 0.5 * inch, f"Page {doc.page}")

    canvas.restoreState()


# ============================================================
# PDF BUILDER
# ============================================================

def build_pdf(
    output_path: str,
    elements: list,
    report_title: str,
    report_date: str,
    pagesize=A4
):
    """
    Builds a branded inventory PDF.
    Supports portrait or landscape pages.
    """

    doc = SimpleDocTemplate(
        output_path,
        pagesize=pagesize,
        leftMargin=0.5 * inch,
        rightMargin=0.5 * inch,
        topMargin=1.15 * inch,
        bottomMargin=1.0 * inch,
        title=report_title,
    )

    header = partial(draw_header_footer, report_title=report_title, report_date=report_date)
    doc.build(elements, onFirstPage=header, onLaterPages=header)
