"""Position bookkeeping: which layout slot each panel id is bound to."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from ..panels.protocol import PanelPosition, PanelProtocol


class PanelLayout:
    """Mapping of panel id to position.

    Its one derived query, has_visible(), decides whether the allocator
    carves space for a position at all, so empty positions leave no gap.
    """

    def __init__(self) -> None:
        self._positions: Dict[str, PanelPosition] = {}

    def assign(self, panel_id: str, position: PanelPosition) -> None:
        self._positions[panel_id] = position

    def position_of(self, panel_id: str) -> Optional[PanelPosition]:
        return self._positions.get(panel_id)

    def ids_at(self, position: PanelPosition) -> List[str]:
        """Panel ids bound to ``position``, in registration order."""
        return [pid for pid, pos in self._positions.items() if pos is position]

    def has_visible(
        self, position: PanelPosition, panels: Mapping[str, PanelProtocol]
    ) -> bool:
        """True if at least one registered panel at ``position`` is visible."""
        return any(
            panels[pid].is_visible() for pid in self.ids_at(position) if pid in panels
        )

    def __contains__(self, panel_id: object) -> bool:
        return panel_id in self._positions

    def __len__(self) -> int:
        return len(self._positions)
