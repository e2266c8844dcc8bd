"""Tests for the Canvas render target."""

from io import StringIO

from rich.console import Console
from rich.text import Text
from textual.geometry import Region

from paneldash.ui.canvas import Canvas


class TestCanvas:
    def test_starts_blank(self):
        canvas = Canvas(10, 3)
        assert canvas.plain_lines() == [" " * 10] * 3
        assert canvas.region == Region(0, 0, 10, 3)

    def test_draw_places_text_at_region(self):
        canvas = Canvas(10, 3)
        canvas.draw(Region(2, 1, 5, 1), Text("hello"))
        assert canvas.plain_lines() == [
            " " * 10,
            "  hello   ",
            " " * 10,
        ]

    def test_draw_crops_to_region(self):
        canvas = Canvas(10, 2)
        canvas.draw(Region(0, 0, 4, 1), Text("overflowing", no_wrap=True, overflow="crop"))
        assert canvas.plain_lines()[0] == "over      "
        assert canvas.plain_lines()[1] == " " * 10

    def test_draw_clips_to_canvas(self):
        canvas = Canvas(6, 2)
        canvas.draw(Region(4, 1, 10, 5), Text("abcdef"))
        assert canvas.plain_lines() == [" " * 6, "    ab"]

    def test_later_draw_overwrites(self):
        canvas = Canvas(6, 1)
        canvas.draw(Region(0, 0, 6, 1), Text("aaaaaa"))
        canvas.draw(Region(2, 0, 2, 1), Text("bb"))
        assert canvas.plain_lines() == ["aabbaa"]

    def test_rows_keep_width(self):
        canvas = Canvas(12, 4)
        canvas.draw(Region(0, 0, 12, 4), Text("x"))
        canvas.draw(Region(3, 2, 5, 2), Text("y"))
        assert all(len(line) == 12 for line in canvas.plain_lines())

    def test_zero_area_draw_is_ignored(self):
        canvas = Canvas(5, 1)
        canvas.draw(Region(2, 0, 0, 1), Text("nope"))
        assert canvas.plain_lines() == [" " * 5]

    def test_plain_text_of_region(self):
        canvas = Canvas(8, 2)
        canvas.draw(Region(4, 0, 4, 2), Text("left\nmid"))
        assert canvas.plain_text(Region(4, 0, 4, 2)) == ["left", "mid "]

    def test_surface_is_clipped_and_draws(self):
        canvas = Canvas(8, 2)
        surface = canvas.surface(Region(6, 0, 10, 10), focused=True)
        assert surface.region == Region(6, 0, 2, 2)
        assert surface.focused
        surface.draw(Text("zz"))
        assert canvas.plain_lines()[0] == "      zz"

    def test_is_a_rich_renderable(self):
        canvas = Canvas(4, 2)
        canvas.draw(Region(0, 0, 4, 1), Text("abcd"))
        output = StringIO()
        Console(file=output, width=4, color_system=None).print(canvas)
        assert output.getvalue().splitlines()[0] == "abcd"
