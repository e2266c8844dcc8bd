"""
Layout system for paneldash.

Panels are bound to one of four positions (left, right, bottom, floating).
Each frame the PanelManager carves the screen into one region per occupied
position and draws the front-most visible panel of each.

Usage:
    from paneldash.ui.canvas import Canvas
    from paneldash.ui.layout import PanelManager

    manager = PanelManager()
    manager.register("file_tree", FileTreePanel(), "left")

    canvas = Canvas(80, 24)
    manager.render(canvas)
"""

from .manager import PanelManager
from .positions import PanelLayout

__all__ = ["PanelManager", "PanelLayout"]
