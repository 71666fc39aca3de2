# src/plot_inventory/utils/file_utils.py

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from plot_inventory.utils.logger import get_logger


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_ignore_empty=True, extra='ignore')

    report_retention_days: int = 30


logger = get_logger(__name__)

REPORT_SUFFIXES = (".pdf", ".csv", ".png")


def cleanup_old_files(output_root, retention_days: int | None = None) -> int:
    """
    Deletes generated report files in the output directory older than the
    retention window.

    :param output_root: Path to the output directory.
    :param retention_days: Days to retain files (default: REPORT_RETENTION_DAYS or 30).
    :return: Number of files deleted.
    """
    if retention_days is None:
        retention_days = AppConfig().report_retention_days

    output_root = Path(output_root)
    cutoff = datetime.now() - timedelta(days=retention_days)

    if not output_root.exists():
        logger.warning(f"Output directory does not exist: {output_root}")
        return 0

    deleted_count = 0
    for file_path in output_root.iterdir():
        if not file_path.is_file() or file_path.suffix.lower() not in REPORT_SUFFIXES:
            continue
        file_mtime = datetime.fromtimestamp(file_path.stat().st_mtime)
        if file_mtime < cutoff:
            try:
                file_path.unlink()
                deleted_count += 1
                logger.info(f"Deleted old file: {file_path}")
            except OSError as e:
                logger.error(f"Failed to delete {file_path}: {e}")

    logger.info(f"Cleanup complete. Deleted {deleted_count} files older than {retention_days} days.")
    return deleted_count
