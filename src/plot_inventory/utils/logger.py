# utils/logger.py
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_FILE = Path(os.getenv("LOG_FILE", LOG_DIR / "plot_inventory.log"))

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handlers: list[logging.Handler] = []
_console: logging.StreamHandler | None = None


def _shared_handlers() -> list[logging.Handler]:
    # File + console handlers are created once and shared by every logger
    global _console
    if not _handlers:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT)

        file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        file_handler.setLevel(LOG_LEVEL)
        file_handler.setFormatter(formatter)

        _console = logging.StreamHandler()
        _console.setLevel("WARNING")
        _console.setFormatter(formatter)

        _handlers.extend([file_handler, _console])
    return _handlers


def set_console_level(level: str) -> None:
    """Change what reaches the terminal (the log file is unaffected)."""
    _shared_handlers()
    _console.setLevel(level.upper())


def get_logger(name: str = "plot_inventory") -> logging.Logger:
    """Return a configured logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    if not logger.handlers:
        for handler in _shared_handlers():
            logger.addHandler(handler)

    return logger
