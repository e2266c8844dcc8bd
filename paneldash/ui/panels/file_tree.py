"""File tree panel - an expandable, navigable listing of a project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from rich.text import Text

from ..events import KEY_ENTER, KEY_RIGHT, KeyEvent
from .base import SelectableListPanel

logger = logging.getLogger(__name__)

EXPAND_KEYS = frozenset({KEY_ENTER, KEY_RIGHT})

DIRECTORY_STYLE = "bold blue"
FILE_STYLE = ""


@dataclass
class FileTreeItem:
    """One entry of the tree, flattened in display order.

    ``depth`` is the nesting level (0 for top-level entries). ``expanded``
    only means something for directories.
    """

    name: str
    path: str
    is_directory: bool = False
    depth: int = 0
    expanded: bool = False


def sample_file_tree() -> List[FileTreeItem]:
    """Static listing shown until a file-system feed is wired in."""
    return [
        FileTreeItem("src", "src", is_directory=True, depth=0, expanded=True),
        FileTreeItem("main.rs", "src/main.rs", depth=1),
        FileTreeItem("lib.rs", "src/lib.rs", depth=1),
        FileTreeItem("ui", "src/ui", is_directory=True, depth=1, expanded=True),
        FileTreeItem("mod.rs", "src/ui/mod.rs", depth=2),
        FileTreeItem("panels.rs", "src/ui/panels.rs", depth=2),
        FileTreeItem("tests", "tests", is_directory=True, depth=0, expanded=True),
        FileTreeItem("integration.rs", "tests/integration.rs", depth=1),
        FileTreeItem("Cargo.toml", "Cargo.toml", depth=0),
        FileTreeItem("README.md", "README.md", depth=0),
    ]


class FileTreePanel(SelectableListPanel[FileTreeItem]):
    """
    Navigable file tree.

    Up/down move the selection over the displayed rows without wrapping.
    Enter/right expands or collapses the selected directory; on a file it
    does nothing. Children of a collapsed directory are not displayed.
    """

    TITLE = "Files"
    EMPTY_MESSAGE = "No files"

    def __init__(
        self, items: Optional[Iterable[FileTreeItem]] = None, visible: bool = True
    ) -> None:
        super().__init__(visible)
        source = sample_file_tree() if items is None else items
        # The panel owns its entries; callers keep theirs untouched
        self._items: List[FileTreeItem] = [replace(item) for item in source]

    @property
    def items(self) -> List[FileTreeItem]:
        """All entries, including those hidden under collapsed directories."""
        return list(self._items)

    def rows(self) -> List[FileTreeItem]:
        rows = []
        collapsed_depth: Optional[int] = None
        for item in self._items:
            if collapsed_depth is not None:
                if item.depth > collapsed_depth:
                    continue
                collapsed_depth = None
            rows.append(item)
            if item.is_directory and not item.expanded:
                collapsed_depth = item.depth
        return rows

    def handle_key(self, event: KeyEvent) -> bool:
        if not (event.plain and event.key in EXPAND_KEYS):
            return False

        item = self.selected_item()
        if item is None:
            return False
        if item.is_directory:
            item.expanded = not item.expanded
            logger.debug(f"{'Expanded' if item.expanded else 'Collapsed'} {item.path}")
            self._clamp_selection()
        return True

    def render_row(self, item: FileTreeItem) -> Text:
        indent = "  " * item.depth
        if item.is_directory:
            marker = "▾ " if item.expanded else "▸ "
            return Text(f"{indent}{marker}{item.name}/", style=DIRECTORY_STYLE)
        return Text(f"{indent}  {item.name}", style=FILE_STYLE)
