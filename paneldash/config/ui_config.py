"""
paneldash UI configuration.

Handles persistence of layout extents, panel shortcuts and the initially
active panel. Config is stored in ~/.config/paneldash/ui_config.json
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, TypedDict

from .constants import (
    DEFAULT_BOTTOM_HEIGHT,
    DEFAULT_LEFT_WIDTH,
    DEFAULT_RIGHT_WIDTH,
    DEFAULT_SHORTCUTS,
    FILE_TREE_PANEL,
    PANELDASH_CONFIG_DIR,
)

logger = logging.getLogger(__name__)


class LayoutConfig(TypedDict):
    """Fixed extents carved out for the edge positions."""

    left_width: int
    right_width: int
    bottom_height: int


DEFAULT_LAYOUT: LayoutConfig = {
    "left_width": DEFAULT_LEFT_WIDTH,
    "right_width": DEFAULT_RIGHT_WIDTH,
    "bottom_height": DEFAULT_BOTTOM_HEIGHT,
}

DEFAULT_CONFIG: dict[str, Any] = {
    "layout": {**DEFAULT_LAYOUT},
    "shortcuts": {**DEFAULT_SHORTCUTS},
    "active_panel": FILE_TREE_PANEL,
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/paneldash/ui_config.json
    """
    PANELDASH_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return PANELDASH_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                raise ValueError("top-level value is not an object")
            merged = copy.deepcopy(DEFAULT_CONFIG)
            merged.update(config)
            return merged
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable UI config {path}: {e}")
            return copy.deepcopy(DEFAULT_CONFIG)
    return copy.deepcopy(DEFAULT_CONFIG)


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.warning(f"Could not save UI config to {path}: {e}")


def get_layout() -> LayoutConfig:
    """Get layout extents, merged with defaults."""
    raw = load_ui_config().get("layout", {})
    if not isinstance(raw, dict):
        return {**DEFAULT_LAYOUT}
    return {**DEFAULT_LAYOUT, **raw}  # type: ignore[typeddict-item]


def set_layout(layout: LayoutConfig) -> None:
    """Persist layout extents."""
    config = load_ui_config()
    config["layout"] = dict(layout)
    save_ui_config(config)


def get_shortcuts() -> dict[str, str]:
    """Get the key -> panel id map used by the host to toggle panels."""
    raw = load_ui_config().get("shortcuts", {})
    if not isinstance(raw, dict):
        return {**DEFAULT_SHORTCUTS}
    return {str(key): str(panel_id) for key, panel_id in raw.items()}


def get_active_panel() -> str | None:
    """Get the id of the panel that should start out active."""
    value = load_ui_config().get("active_panel")
    return str(value) if value else None
