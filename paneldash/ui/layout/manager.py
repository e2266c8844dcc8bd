"""
Panel manager: owns the panels, allocates screen regions, routes input.

The PanelManager is responsible for:
- Owning every registered panel and its position
- Tracking the active panel (first refusal on input)
- Carving the screen into per-position regions each frame
- Rendering the front visible panel of each position
- Offering key events to panels in priority order

Unknown panel ids are never an error here: toggling, raising or rendering a
panel that isn't registered is a logged no-op.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Union

from textual.geometry import Region

from paneldash.config.constants import (
    DEFAULT_BOTTOM_HEIGHT,
    DEFAULT_LEFT_WIDTH,
    DEFAULT_RIGHT_WIDTH,
)
from paneldash.config.ui_config import LayoutConfig
from paneldash.exceptions import ConfigurationError, InvalidPanelError

from ..canvas import Canvas
from ..events import KeyEvent
from ..panels.protocol import PanelPosition, PanelProtocol, is_panel
from .positions import PanelLayout

logger = logging.getLogger(__name__)


def _validate_extent(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError("Extent must be an integer", setting=name, value=value)
    if value < 0:
        raise ConfigurationError("Extent must be non-negative", setting=name, value=value)
    return value


class PanelManager:
    """Registry, layout allocator and input dispatcher for dashboard panels.

    Stacking: the manager keeps a back-to-front order of panel ids. A panel
    moves to the front when it is registered, when toggle() makes it visible
    and when raise_panel() is called. Each position draws only its front-most
    visible panel, and dispatch offers events only to drawn panels,
    front-most first.

    Usage:
        manager = PanelManager(left_width=30, bottom_height=10)
        manager.register("file_tree", FileTreePanel(), PanelPosition.LEFT)
        manager.set_active("file_tree")

        manager.render(canvas)
        consumed = manager.dispatch(KeyEvent.parse("down"))
    """

    def __init__(
        self,
        left_width: int = DEFAULT_LEFT_WIDTH,
        right_width: int = DEFAULT_RIGHT_WIDTH,
        bottom_height: int = DEFAULT_BOTTOM_HEIGHT,
    ) -> None:
        self._panels: Dict[str, PanelProtocol] = {}
        self._layout = PanelLayout()
        self._active_id: Optional[str] = None
        self._z_order: List[str] = []
        self.left_width = left_width
        self.right_width = right_width
        self.bottom_height = bottom_height

    @classmethod
    def from_config(cls, layout: LayoutConfig) -> PanelManager:
        return cls(
            left_width=layout["left_width"],
            right_width=layout["right_width"],
            bottom_height=layout["bottom_height"],
        )

    # ------------------------------------------------------------------
    # Extents
    # ------------------------------------------------------------------

    @property
    def left_width(self) -> int:
        return self._left_width

    @left_width.setter
    def left_width(self, value: int) -> None:
        self._left_width = _validate_extent("left_width", value)

    @property
    def right_width(self) -> int:
        return self._right_width

    @right_width.setter
    def right_width(self, value: int) -> None:
        self._right_width = _validate_extent("right_width", value)

    @property
    def bottom_height(self) -> int:
        return self._bottom_height

    @bottom_height.setter
    def bottom_height(self, value: int) -> None:
        self._bottom_height = _validate_extent("bottom_height", value)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register(
        self,
        panel_id: str,
        panel: PanelProtocol,
        position: Union[PanelPosition, str],
    ) -> None:
        """Register ``panel`` under ``panel_id`` at ``position``.

        Registering an id again replaces the previous panel, which is dropped.

        Raises:
            InvalidPanelError: If ``panel`` doesn't implement PanelProtocol
            ValueError: If ``position`` isn't a valid position name
        """
        if not is_panel(panel):
            raise InvalidPanelError(panel_id=panel_id, type=type(panel).__name__)
        position = PanelPosition.coerce(position)

        if panel_id in self._panels:
            logger.debug(f"Replacing panel '{panel_id}' ({self._panels[panel_id]!r})")

        self._panels[panel_id] = panel
        self._layout.assign(panel_id, position)
        self._bring_to_front(panel_id)
        logger.debug(f"Registered panel '{panel_id}' at {position.value}")

    def get(self, panel_id: str) -> Optional[PanelProtocol]:
        return self._panels.get(panel_id)

    def panel_ids(self) -> List[str]:
        """Registered ids in registration order."""
        return list(self._panels)

    def position_of(self, panel_id: str) -> Optional[PanelPosition]:
        return self._layout.position_of(panel_id)

    @property
    def layout(self) -> PanelLayout:
        return self._layout

    def __contains__(self, panel_id: object) -> bool:
        return panel_id in self._panels

    def __len__(self) -> int:
        return len(self._panels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.panel_ids())

    # ------------------------------------------------------------------
    # Active panel
    # ------------------------------------------------------------------

    @property
    def active_id(self) -> Optional[str]:
        return self._active_id

    def set_active(self, panel_id: Optional[str]) -> None:
        """Record ``panel_id`` as active. Neither existence nor visibility is checked."""
        self._active_id = panel_id

    def active_panel(self) -> Optional[PanelProtocol]:
        if self._active_id is None:
            return None
        return self._panels.get(self._active_id)

    def is_active(self, panel_id: str) -> bool:
        return panel_id == self._active_id

    def visible_ids(self) -> List[str]:
        return [pid for pid, panel in self._panels.items() if panel.is_visible()]

    def cycle_active(self) -> Optional[str]:
        """Make the next visible panel (registration order, wrapping) active.

        Returns:
            The new active id, or None when no panel is visible
        """
        visible = self.visible_ids()
        if not visible:
            return None
        if self._active_id in visible:
            index = (visible.index(self._active_id) + 1) % len(visible)
        else:
            index = 0
        self._active_id = visible[index]
        return self._active_id

    # ------------------------------------------------------------------
    # Visibility and stacking
    # ------------------------------------------------------------------

    def toggle(self, panel_id: str) -> None:
        """Flip visibility of ``panel_id``. A newly shown panel comes to the front."""
        panel = self._panels.get(panel_id)
        if panel is None:
            logger.debug(f"toggle: no panel '{panel_id}'")
            return
        panel.toggle_visibility()
        if panel.is_visible():
            self._bring_to_front(panel_id)
        logger.debug(f"Panel '{panel_id}' is now {'visible' if panel.is_visible() else 'hidden'}")

    def raise_panel(self, panel_id: str) -> None:
        if panel_id not in self._panels:
            logger.debug(f"raise_panel: no panel '{panel_id}'")
            return
        self._bring_to_front(panel_id)

    def front_panel_id(self, position: PanelPosition) -> Optional[str]:
        """The visible panel that draws at ``position``, if any."""
        for panel_id in reversed(self._z_order):
            if (
                self._layout.position_of(panel_id) is position
                and self._panels[panel_id].is_visible()
            ):
                return panel_id
        return None

    def stacking_order(self) -> List[str]:
        """Panel ids from back to front."""
        return list(self._z_order)

    def _bring_to_front(self, panel_id: str) -> None:
        if panel_id in self._z_order:
            self._z_order.remove(panel_id)
        self._z_order.append(panel_id)

    # ------------------------------------------------------------------
    # Layout and rendering
    # ------------------------------------------------------------------

    def compute_layout(self, total: Region) -> Dict[PanelPosition, Region]:
        """Split ``total`` into regions for the positions that have visible panels.

        Carving order is fixed: a left column, then a right column of what
        remains, then a bottom row spanning the reduced width. The rest is
        FLOATING, which is always present. Extents larger than the space left
        are clamped, so regions never overlap or leave ``total``.
        """
        regions: Dict[PanelPosition, Region] = {}
        remaining = total

        if self._layout.has_visible(PanelPosition.LEFT, self._panels):
            width = min(self.left_width, remaining.width)
            regions[PanelPosition.LEFT] = Region(
                remaining.x, remaining.y, width, remaining.height
            )
            remaining = Region(
                remaining.x + width, remaining.y, remaining.width - width, remaining.height
            )

        if self._layout.has_visible(PanelPosition.RIGHT, self._panels):
            width = min(self.right_width, remaining.width)
            regions[PanelPosition.RIGHT] = Region(
                remaining.right - width, remaining.y, width, remaining.height
            )
            remaining = Region(
                remaining.x, remaining.y, remaining.width - width, remaining.height
            )

        if self._layout.has_visible(PanelPosition.BOTTOM, self._panels):
            height = min(self.bottom_height, remaining.height)
            regions[PanelPosition.BOTTOM] = Region(
                remaining.x, remaining.bottom - height, remaining.width, height
            )
            remaining = Region(
                remaining.x, remaining.y, remaining.width, remaining.height - height
            )

        regions[PanelPosition.FLOATING] = remaining
        return regions

    def render(self, canvas: Canvas) -> Dict[PanelPosition, Region]:
        """Lay out the whole canvas and draw each position's front panel.

        Returns:
            The layout used for this frame
        """
        regions = self.compute_layout(canvas.region)
        for position, region in regions.items():
            panel_id = self.front_panel_id(position)
            if panel_id is None:
                continue
            surface = canvas.surface(region, focused=self.is_active(panel_id))
            self._panels[panel_id].render(surface)
        return regions

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def dispatch(self, event: KeyEvent) -> bool:
        """Offer ``event`` to panels until one consumes it.

        The active panel goes first, visible or not. Then every other panel
        that is drawn (the front visible panel of its position) is tried,
        front-most first. Hidden and covered panels are skipped.

        Returns:
            True if a panel consumed the event; False tells the host to fall
            back to its own key bindings
        """
        active = self.active_panel()
        if active is not None:
            if active.handle_event(event):
                logger.debug(f"'{event}' consumed by active panel '{self._active_id}'")
                return True
        elif self._active_id is not None:
            logger.debug(f"Active panel '{self._active_id}' is not registered")

        for panel_id in reversed(self._z_order):
            if panel_id == self._active_id:
                continue
            # A panel covered by another at its position is not on screen
            if self.front_panel_id(self._layout.position_of(panel_id)) != panel_id:
                continue
            if self._panels[panel_id].handle_event(event):
                logger.debug(f"'{event}' consumed by panel '{panel_id}'")
                return True
        return False
