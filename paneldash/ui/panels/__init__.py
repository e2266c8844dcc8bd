"""
Panels for the paneldash dashboard.

This package defines the panel contract and the built-in panels:

1. PanelProtocol - The interface all panels must implement
2. PanelBase / SelectableListPanel - Base classes with shared behaviour
3. Concrete panels - FileTreePanel, DiagnosticsPanel, TerminalPanel

Quick Start:
    from paneldash.ui.layout import PanelManager
    from paneldash.ui.panels import FileTreePanel, PanelPosition

    manager = PanelManager()
    manager.register("file_tree", FileTreePanel(), PanelPosition.LEFT)
"""

from .base import PanelBase, SelectableListPanel
from .diagnostics import Diagnostic, DiagnosticsPanel, Severity, SEVERITY_STYLES
from .file_tree import FileTreeItem, FileTreePanel
from .protocol import PanelPosition, PanelProtocol, is_panel
from .terminal import TerminalPanel

__all__ = [
    "PanelProtocol",
    "PanelPosition",
    "is_panel",
    "PanelBase",
    "SelectableListPanel",
    "FileTreeItem",
    "FileTreePanel",
    "Diagnostic",
    "DiagnosticsPanel",
    "Severity",
    "SEVERITY_STYLES",
    "TerminalPanel",
]
