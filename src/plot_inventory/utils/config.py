# src/plot_inventory/utils/config.py
"""
Runtime configuration, read once from the environment / project .env.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root
BASE_DIR = Path(__file__).resolve().parents[3]
load_dotenv(BASE_DIR / ".env")


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


class Config:
    # Mock mode answers every inventory request from the bundled tables
    USE_MOCK_DATA = _flag("USE_MOCK_DATA", "true")

    API_URL = os.getenv("API_URL", "http://localhost:4000/api/v1").rstrip("/")
    API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30000"))  # milliseconds
    API_DEBUG = _flag("API_DEBUG", "false")
    API_TOKEN = os.getenv("API_TOKEN", "").strip() or None

    SMTP_SERVER = os.getenv("SMTP_SERVER", "localhost")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "25"))
    SENDER_EMAIL = os.getenv("SENDER_EMAIL", "plot-inventory@localhost")
    DEFAULT_RECIPIENTS = [
        e.strip() for e in os.getenv("DEFAULT_RECIPIENTS", "").split(",")
        if e.strip()
    ]

    OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", BASE_DIR / "output"))

    @property
    def api_timeout_seconds(self) -> float:
        return self.API_TIMEOUT / 1000.0

    def __repr__(self):
        mode = "mock" if self.USE_MOCK_DATA else self.API_URL
        return f"<Config inventory={mode} smtp={self.SMTP_SERVER}:{self.SMTP_PORT}>"


# Singleton
config = Config()
