"""
Centralized constants for paneldash.

Extents are measured in character cells.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

PANELDASH_CONFIG_DIR = Path(
    os.environ.get("PANELDASH_CONFIG_DIR", Path.home() / ".config" / "paneldash")
)

# =============================================================================
# LAYOUT EXTENTS
# =============================================================================

DEFAULT_LEFT_WIDTH = 30  # File tree column
DEFAULT_RIGHT_WIDTH = 30
DEFAULT_BOTTOM_HEIGHT = 10  # Diagnostics / terminal row

# =============================================================================
# PANEL IDS
# =============================================================================

FILE_TREE_PANEL = "file_tree"
DIAGNOSTICS_PANEL = "diagnostics"
TERMINAL_PANEL = "terminal"

# Host shortcuts, consulted only when no panel consumed the key
DEFAULT_SHORTCUTS = {
    "ctrl+b": FILE_TREE_PANEL,
    "ctrl+d": DIAGNOSTICS_PANEL,
    "ctrl+t": TERMINAL_PANEL,
}

# =============================================================================
# LOGGING
# =============================================================================

LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB per file
LOG_BACKUP_COUNT = 2
