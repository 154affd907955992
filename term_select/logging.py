from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .settings import Settings

LOG_FILE_NAME = "term_select.log"

# Library default: stay silent unless the application configures logging.
logging.getLogger("term_select").addHandler(logging.NullHandler())


def setup_logging(settings: Settings) -> Path | None:
    """Configure the term_select logger to write to a rotating log file.

    Returns the resolved log file path, or None when TERM_SELECT_LOG_DIR is
    unset and logging stays disabled.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `TERM_SELECT_LOG_BACKUP_COUNT` rotated files.

    Notes:
      - There is deliberately no console handler; log lines would be drawn
        over the menu.
      - This function is safe to call multiple times (it resets handlers).
    """

    raw = settings.TERM_SELECT_LOG_DIR
    if raw is None:
        return None

    log_dir = Path(raw).expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    level_name = str(settings.TERM_SELECT_LOG_LEVEL or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    file_handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        interval=1,
        backupCount=max(0, int(settings.TERM_SELECT_LOG_BACKUP_COUNT or 0)),
        encoding="utf-8",
        utc=False,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(fmt))

    # Reset our handlers so repeated calls don't duplicate lines.
    logger = logging.getLogger("term_select")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info(
        "term_select logging enabled (file=%s, level=%s)",
        os.fspath(log_file),
        level_name,
    )

    return log_file
