"""
Panel Protocol - the contract every dashboard panel satisfies.

A panel is an independently rendering, independently input-handling region
with its own visibility. The manager only ever talks to panels through the
five operations below, so new panel kinds can be added without touching it.

This uses Python's Protocol for structural subtyping: any object with these
methods IS a panel, whether or not it derives from PanelBase.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from ..canvas import Surface
    from ..events import KeyEvent


class PanelPosition(Enum):
    """The four layout slots a panel can be bound to."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    FLOATING = "floating"

    @classmethod
    def coerce(cls, value: Union[PanelPosition, str]) -> PanelPosition:
        """Accept a position or its string value ("left", "Bottom", ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Invalid panel position '{value}'. Must be one of: {valid}") from None


@runtime_checkable
class PanelProtocol(Protocol):
    """
    The core protocol that all panels must implement.

    Required Methods:
    -----------------
    - title(): Constant display title
    - render(surface): Draw into surface.region; may only touch the panel's
      own display state (scroll offset, selection clamp)
    - handle_event(event): Return True iff the event was consumed
    - is_visible(): Current visibility
    - toggle_visibility(): Flip visibility, nothing else
    """

    def title(self) -> str:
        ...

    def render(self, surface: Surface) -> None:
        ...

    def handle_event(self, event: KeyEvent) -> bool:
        ...

    def is_visible(self) -> bool:
        ...

    def toggle_visibility(self) -> None:
        ...


def is_panel(obj: Any) -> bool:
    """
    Check if an object implements the panel protocol.

    Uses runtime_checkable protocol for duck typing.
    """
    return isinstance(obj, PanelProtocol)
