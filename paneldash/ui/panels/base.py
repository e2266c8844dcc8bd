"""
Base classes for dashboard panels.

PanelBase supplies visibility state and the bordered frame all built-in
panels draw inside. SelectableListPanel adds a clamped selection index and a
scroll offset for panels that show one item per row.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Optional, Sequence, TypeVar

from rich import box
from rich.console import RenderableType
from rich.panel import Panel as RichPanel
from rich.text import Text

from ..canvas import Surface
from ..events import KEY_DOWN, KEY_UP, KeyEvent

logger = logging.getLogger(__name__)

FOCUSED_BORDER_STYLE = "bright_blue"
UNFOCUSED_BORDER_STYLE = "grey42"
SELECTED_ROW_STYLE = "reverse"

# Vim-style aliases for the arrow keys
UP_KEYS = frozenset({KEY_UP, "k"})
DOWN_KEYS = frozenset({KEY_DOWN, "j"})

ItemT = TypeVar("ItemT")


class PanelBase(ABC):
    """
    Abstract base class for panels.

    Subclasses set TITLE and implement render(). handle_event() defaults to
    consuming nothing.
    """

    TITLE: ClassVar[str] = ""

    def __init__(self, visible: bool = True) -> None:
        self._visible = visible

    def title(self) -> str:
        return self.TITLE

    def is_visible(self) -> bool:
        return self._visible

    def toggle_visibility(self) -> None:
        self._visible = not self._visible

    @abstractmethod
    def render(self, surface: Surface) -> None:
        """Draw the panel into surface.region."""

    def handle_event(self, event: KeyEvent) -> bool:
        return False

    def heading(self) -> str:
        """Text shown in the frame's top border. Defaults to the title."""
        return self.title()

    def frame(self, body: RenderableType, surface: Surface) -> RichPanel:
        """Wrap ``body`` in the standard panel border."""
        return RichPanel(
            body,
            title=self.heading(),
            title_align="left",
            box=box.ROUNDED,
            border_style=FOCUSED_BORDER_STYLE if surface.focused else UNFOCUSED_BORDER_STYLE,
            expand=True,
        )

    def __repr__(self) -> str:
        state = "visible" if self._visible else "hidden"
        return f"<{type(self).__name__} {self.title()!r} {state}>"


class SelectableListPanel(PanelBase, Generic[ItemT]):
    """
    A panel showing one item per row with a movable selection.

    The selection index always lies in [0, len(rows) - 1], or is 0 when there
    are no rows. Subclasses provide rows() and render_row() and may extend
    handle_key() for keys beyond up/down.
    """

    EMPTY_MESSAGE: ClassVar[str] = "Nothing to show"

    def __init__(self, visible: bool = True) -> None:
        super().__init__(visible)
        self._selected = 0
        self._scroll = 0

    @abstractmethod
    def rows(self) -> Sequence[ItemT]:
        """The items currently displayed, in display order."""

    @abstractmethod
    def render_row(self, item: ItemT) -> Text:
        """Render a single row (selection highlight is applied by the caller)."""

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def scroll_offset(self) -> int:
        return self._scroll

    def selected_item(self) -> Optional[ItemT]:
        rows = self.rows()
        return rows[self._selected] if rows else None

    def move_selection(self, delta: int) -> None:
        """Move the selection by ``delta`` rows, stopping at either end."""
        self._selected += delta
        self._clamp_selection()

    def _clamp_selection(self) -> None:
        count = len(self.rows())
        self._selected = 0 if count == 0 else min(max(self._selected, 0), count - 1)

    def handle_event(self, event: KeyEvent) -> bool:
        if event.plain and event.key in UP_KEYS:
            self.move_selection(-1)
            return True
        if event.plain and event.key in DOWN_KEYS:
            self.move_selection(1)
            return True
        return self.handle_key(event)

    def handle_key(self, event: KeyEvent) -> bool:
        """Hook for keys other than up/down."""
        return False

    def _visible_window(self, height: int) -> range:
        """Rows that fit in ``height`` lines, scrolled so the selection shows."""
        count = len(self.rows())
        if height <= 0 or count == 0:
            self._scroll = 0
            return range(0)

        if self._selected < self._scroll:
            self._scroll = self._selected
        elif self._selected >= self._scroll + height:
            self._scroll = self._selected - height + 1
        self._scroll = min(self._scroll, max(count - height, 0))
        return range(self._scroll, min(self._scroll + height, count))

    def render(self, surface: Surface) -> None:
        self._clamp_selection()
        rows = self.rows()
        # Two lines go to the border
        window = self._visible_window(surface.height - 2)

        lines = []
        for index in window:
            line = self.render_row(rows[index])
            if index == self._selected:
                line.stylize(SELECTED_ROW_STYLE)
            lines.append(line)

        if lines:
            body = Text("\n", no_wrap=True, overflow="ellipsis").join(lines)
        else:
            body = Text(self.EMPTY_MESSAGE, style="dim italic")
        surface.draw(self.frame(body, surface))
