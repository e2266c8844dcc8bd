"""Shared pytest fixtures for paneldash tests."""

import pytest

from paneldash.ui.layout import PanelManager
from paneldash.ui.panels import (
    DiagnosticsPanel,
    FileTreePanel,
    PanelPosition,
    TerminalPanel,
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the UI config at a temporary file for every test."""
    config_path = tmp_path / "ui_config.json"
    monkeypatch.setattr(
        "paneldash.config.ui_config.get_ui_config_path",
        lambda: config_path,
    )
    return config_path


@pytest.fixture
def manager() -> PanelManager:
    """File tree at left (visible), diagnostics and terminal at bottom (hidden)."""
    manager = PanelManager(left_width=30, right_width=20, bottom_height=10)
    manager.register("file_tree", FileTreePanel(), PanelPosition.LEFT)
    manager.register("diagnostics", DiagnosticsPanel(visible=False), PanelPosition.BOTTOM)
    manager.register("terminal", TerminalPanel(visible=False), PanelPosition.BOTTOM)
    return manager
