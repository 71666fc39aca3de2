import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from html import escape
from typing import List

from plot_inventory.utils.config import config
from plot_inventory.utils.logger import get_logger

log = get_logger(__name__)

BAND_COLORS = {
    "SOLD OUT": "#7f8c8d",
    "CRITICAL": "#e74c3c",
    "HIGH": "#e67e22",
    "MODERATE": "#f1c40f",
    "NORMAL": "#27ae60",
}


def _colorize(report_text: str) -> str:
    colored = escape(report_text)
    for label, color in BAND_COLORS.items():
        colored = colored.replace(
            label,
            f'<span style="color:{color};font-weight:bold;">{label}</span>',
        )
    return colored


def _summary_value(lines: List[str], label: str, default: str = "N/A") -> str:
    line = next((l for l in lines if l.startswith(label)), None)
    if line is None:
        return default
    return line.split(":", 1)[1].strip()


def build_inventory_email(report_text: str) -> tuple[str, str]:
    """
    Build (subject, html) for the inventory e-mail.

    report_text is the full console report; the headline figures are read
    back from its summary lines.
    """
    lines = report_text.splitlines()
    remaining = _summary_value(lines, "Remaining Plots")
    usage = _summary_value(lines, "Usage Rate")
    as_of = _summary_value(lines, "As Of", default="")

    subject = f"Plot Inventory – {remaining} plots remaining ({usage} used)"

    html = f"""
    <html>
    <body style="font-family: Calibri, Arial, sans-serif; line-height:1.6; color:#333;">
      <h2 style="color:#2c3e50;">Plot Inventory Report</h2>
      <p><strong>As of {escape(as_of)}</strong></p>

      <div style="background:#f8f9fa;padding:15px;border-left:6px solid #3498db;margin:20px 0;">
        <p><strong>Remaining Plots:</strong>
           <span style="font-size:1.2em;">{escape(remaining)}</span>
        </p>
        <p><strong>Usage Rate:</strong> {escape(usage)}</p>
      </div>

      <pre style="background:#f5f5f5;padding:15px;border:1px solid #eee;
                  font-size:10pt;font-family:Consolas, 'MS Gothic', monospace;line-height:1.3;">
{_colorize(report_text)}
      </pre>

      <hr style="border:0;border-top:1px solid #eee;margin:40px 0;">
      <p style="color:#95a5a6;font-size:85%;">
        Automated • Cemetery Administration
      </p>
    </body>
    </html>
    """
    return subject, html


def send_inventory_email(report_text: str, recipients: List[str]) -> None:
    if not recipients:
        raise ValueError("Inventory e-mail recipients list is empty.")

    subject, html = build_inventory_email(report_text)

    msg = MIMEMultipart("alternative")
    msg["From"] = config.SENDER_EMAIL
    msg["To"] = ", ".join(recipients)
    msg["Subject"] = subject
    msg.attach(MIMEText(report_text, "plain", "utf-8"))
    msg.attach(MIMEText(html, "html", "utf-8"))

    try:
        with smtplib.SMTP(config.SMTP_SERVER, config.SMTP_PORT) as server:
            server.sendmail(config.SENDER_EMAIL, recipients, msg.as_string())
        log.info(f"Plot inventory report sent to: {', '.join(recipients)}")
    except Exception:
        log.error("Failed to send plot inventory email", exc_info=True)
        raise
