"""
Render target for one dashboard frame.

A Canvas is a grid of rich Segment lines the size of the screen. Panels never
see the canvas itself: the manager hands each panel a Surface, which clips
everything the panel draws to the panel's region. Rich does the actual text
layout; the canvas only splices the rendered lines into place.

The canvas is itself a rich renderable, so a textual widget can return it
from render() and the CLI can print it.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.segment import Segment
from textual.geometry import Region


class Canvas:
    """A fixed-size grid of styled cells, rebuilt every frame."""

    def __init__(self, width: int, height: int, console: Optional[Console] = None) -> None:
        self.region = Region(0, 0, max(width, 0), max(height, 0))
        self.console = console or Console(
            width=max(width, 1),
            height=max(height, 1),
            file=io.StringIO(),
            force_terminal=True,
            color_system="truecolor",
            legacy_windows=False,
        )
        self._lines: List[List[Segment]] = [
            [Segment(" " * self.width)] for _ in range(self.height)
        ]

    @property
    def width(self) -> int:
        return self.region.width

    @property
    def height(self) -> int:
        return self.region.height

    def surface(self, region: Region, focused: bool = False) -> Surface:
        """Get a drawing surface clipped to ``region``."""
        return Surface(self, region.intersection(self.region), focused)

    def draw(self, region: Region, renderable: RenderableType) -> None:
        """Render ``renderable`` to exactly fill ``region``, replacing its cells."""
        region = region.intersection(self.region)
        if not region.area:
            return

        options = self.console.options.update_dimensions(region.width, region.height)
        lines = self.console.render_lines(renderable, options, pad=True)

        for offset, line in enumerate(lines[: region.height]):
            y = region.y + offset
            line = Segment.adjust_line_length(line, region.width)
            parts = list(Segment.divide(self._lines[y], [region.x, region.right, self.width]))
            before = parts[0] if parts else []
            after = parts[2] if len(parts) > 2 else []
            self._lines[y] = [*before, *line, *after]

    def plain_lines(self) -> List[str]:
        """The canvas content as unstyled text, one string per row."""
        return ["".join(segment.text for segment in line) for line in self._lines]

    def plain_text(self, region: Region) -> List[str]:
        """Unstyled text of the rows covered by ``region``, cropped to it."""
        region = region.intersection(self.region)
        rows = self.plain_lines()[region.y : region.bottom]
        return [row[region.x : region.right] for row in rows]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        new_line = Segment.line()
        for line in self._lines:
            yield from line
            yield new_line


@dataclass(frozen=True)
class Surface:
    """The part of a canvas a single panel may draw into.

    Valid only for the duration of the render call it was handed to.
    """

    canvas: Canvas
    region: Region
    focused: bool = False

    @property
    def width(self) -> int:
        return self.region.width

    @property
    def height(self) -> int:
        return self.region.height

    def draw(self, renderable: RenderableType) -> None:
        """Draw ``renderable`` over the whole surface."""
        self.canvas.draw(self.region, renderable)
