"""Logging setup for paneldash.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

Configuration happens once, at the application level, through
setup_tui_logging(). Output goes to a rotating file because a console
handler would write over the terminal UI.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from paneldash.config.constants import (
    LOG_BACKUP_COUNT,
    LOG_MAX_BYTES,
    PANELDASH_CONFIG_DIR,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_path(log_dir: Optional[Path] = None) -> Path:
    """Return the path of the dashboard log file, creating its directory."""
    log_dir = log_dir or PANELDASH_CONFIG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "paneldash.log"


def setup_tui_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Set up file logging for the dashboard.

    The root logger is set to WARNING to avoid noise from third-party libs.
    paneldash's own loggers (paneldash.*) are set to INFO, or DEBUG when
    verbose.

    Returns:
        The "paneldash" package logger
    """
    package_logger = logging.getLogger("paneldash")
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    try:
        root = logging.getLogger()
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            handler = RotatingFileHandler(
                get_log_path(log_dir), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
            root.setLevel(logging.WARNING)
    except OSError as e:
        # Logging is what's failing, so there is nowhere else to report it
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    return package_logger
