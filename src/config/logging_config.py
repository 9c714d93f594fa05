# src/config/logging_config.py

"""Per-session logging for the catalog viewer.

Every launch (TUI or headless) writes to its own file inside ``logs/``,
stamped with the launch time, e.g. ``logs/session_20261017_091500.log``.
The ``assort_catalog`` logger owns both handlers, so any module that logs
through ``assort_catalog.<area>`` ends up in the session file.

The console only shows warnings and errors by default: the TUI owns the
terminal, and the headless CLI keeps stdout for its JSON output.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

LOGGER_NAME = "assort_catalog"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _session_log_path(logs_dir: Path) -> Path:
    """Return the log file path for a session starting now."""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return logs_dir / f"session_{stamp}.log"


def setup_logging(console_level: int = logging.WARNING) -> Path:
    """Attach the file and console handlers to the ``assort_catalog`` logger.

    Args:
        console_level: Minimum level echoed to stderr.

    Returns:
        The :class:`~pathlib.Path` of this session's log file. When the
        logger is already configured (tests, repeated calls) the existing
        file handler's path is returned and no handler is added.
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)

    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = _session_log_path(logs_dir)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Session log opened at %s", log_file)
    return log_file
