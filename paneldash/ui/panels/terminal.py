"""Terminal panel - read-only process output."""

from __future__ import annotations

from typing import Iterable, List, Optional

from rich.text import Text

from ..canvas import Surface
from ..events import KeyEvent
from .base import PanelBase


def sample_output() -> List[str]:
    """Static output shown until a process feed is wired in."""
    return [
        "$ cargo build",
        "   Compiling dashboard v0.1.0",
        "error[E0308]: mismatched types",
        "  --> src/main.rs:42:18",
        "warning: unused variable: `layout`",
        "error: could not compile `dashboard` due to previous error",
    ]


class TerminalPanel(PanelBase):
    """Shows a static line buffer. Consumes no input."""

    TITLE = "Terminal"

    def __init__(self, lines: Optional[Iterable[str]] = None, visible: bool = True) -> None:
        super().__init__(visible)
        self._lines: List[str] = list(sample_output() if lines is None else lines)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    def handle_event(self, event: KeyEvent) -> bool:
        return False

    def render(self, surface: Surface) -> None:
        surface.draw(self.frame(Text(self.text(), no_wrap=True, overflow="ellipsis"), surface))
