"""
Textual host for the panel dashboard.

The host owns the event loop. Every key press is first dispatched through the
PanelManager; only keys no panel consumed reach the host's own shortcuts
(panel toggles, tab to cycle the active panel) and finally the app bindings.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from rich.console import RenderableType
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget

from paneldash.config.constants import (
    DEFAULT_SHORTCUTS,
    DIAGNOSTICS_PANEL,
    FILE_TREE_PANEL,
    TERMINAL_PANEL,
)
from paneldash.config.ui_config import DEFAULT_LAYOUT, LayoutConfig
from paneldash.exceptions import ConfigurationError

from .canvas import Canvas
from .events import KeyEvent
from .layout import PanelManager
from .panels import DiagnosticsPanel, FileTreePanel, PanelPosition, TerminalPanel

logger = logging.getLogger(__name__)

CYCLE_KEY = KeyEvent("tab")


def build_default_manager(
    layout: Optional[LayoutConfig] = None,
    active_panel: Optional[str] = FILE_TREE_PANEL,
) -> PanelManager:
    """The stock dashboard: file tree on the left, diagnostics and terminal
    sharing the bottom row (both hidden until toggled)."""
    manager = PanelManager.from_config(layout or DEFAULT_LAYOUT)
    manager.register(FILE_TREE_PANEL, FileTreePanel(), PanelPosition.LEFT)
    manager.register(DIAGNOSTICS_PANEL, DiagnosticsPanel(visible=False), PanelPosition.BOTTOM)
    manager.register(TERMINAL_PANEL, TerminalPanel(visible=False), PanelPosition.BOTTOM)
    manager.set_active(active_panel)
    return manager


def resolve_shortcuts(
    shortcuts: Mapping[str, str], manager: PanelManager
) -> Dict[KeyEvent, str]:
    """Parse a key-name -> panel-id map and check every id is registered.

    Raises:
        ConfigurationError: For an unparseable key or an unknown panel id
    """
    resolved: Dict[KeyEvent, str] = {}
    for key_name, panel_id in shortcuts.items():
        try:
            key = KeyEvent.parse(key_name)
        except ValueError as e:
            raise ConfigurationError(str(e), setting="shortcuts", key=key_name) from e
        if panel_id not in manager:
            raise ConfigurationError(
                "Shortcut refers to an unknown panel",
                setting="shortcuts",
                key=key_name,
                panel_id=panel_id,
            )
        resolved[key] = panel_id
    return resolved


class DashboardView(Widget, can_focus=True):
    """Full-screen widget that draws the manager's panels and routes keys."""

    DEFAULT_CSS = """
    DashboardView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(
        self,
        panel_manager: PanelManager,
        shortcuts: Mapping[KeyEvent, str],
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.panel_manager = panel_manager
        self.shortcuts = dict(shortcuts)

    def render(self) -> RenderableType:
        canvas = Canvas(self.size.width, self.size.height)
        self.panel_manager.render(canvas)
        return canvas

    def route_key(self, key: KeyEvent) -> bool:
        """Route one key. Returns True if the panels or the host used it."""
        if self.panel_manager.dispatch(key):
            return True

        panel_id = self.shortcuts.get(key)
        if panel_id is not None:
            self.toggle_panel(panel_id)
            return True

        if key == CYCLE_KEY:
            self.panel_manager.cycle_active()
            return True
        return False

    def toggle_panel(self, panel_id: str) -> None:
        """Show or hide a panel. A shown panel becomes active; hiding the
        active panel passes focus on to the next visible one."""
        manager = self.panel_manager
        manager.toggle(panel_id)
        panel = manager.get(panel_id)
        if panel is None:
            return
        if panel.is_visible():
            manager.set_active(panel_id)
        elif manager.is_active(panel_id):
            manager.cycle_active()

    def on_key(self, event: events.Key) -> None:
        try:
            key = KeyEvent.parse(event.key)
        except ValueError:
            logger.debug(f"Ignoring unparseable key '{event.key}'")
            return
        if self.route_key(key):
            event.stop()
            event.prevent_default()
            self.refresh()


class DashboardApp(App[None]):
    """Terminal dashboard made of independently rendering panels."""

    TITLE = "paneldash"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        panel_manager: Optional[PanelManager] = None,
        shortcuts: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__()
        if panel_manager is None:
            panel_manager = build_default_manager()
        self.panel_manager = panel_manager
        self.panel_shortcuts = resolve_shortcuts(
            DEFAULT_SHORTCUTS if shortcuts is None else shortcuts, self.panel_manager
        )

    def compose(self) -> ComposeResult:
        yield DashboardView(self.panel_manager, self.panel_shortcuts, id="dashboard")

    def on_mount(self) -> None:
        self.query_one(DashboardView).focus()
        logger.info(
            f"Dashboard started with panels {self.panel_manager.panel_ids()}, "
            f"active={self.panel_manager.active_id!r}"
        )
