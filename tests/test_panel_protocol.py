"""Tests for the panel contract and position model."""

import pytest

from paneldash.ui.layout import PanelLayout
from paneldash.ui.panels import (
    DiagnosticsPanel,
    FileTreePanel,
    PanelPosition,
    TerminalPanel,
    is_panel,
)
from panel_fixtures import RecordingPanel


class DuckPanel:
    """Satisfies the protocol without inheriting from PanelBase."""

    def title(self):
        return "Duck"

    def render(self, surface):
        pass

    def handle_event(self, event):
        return False

    def is_visible(self):
        return True

    def toggle_visibility(self):
        pass


class TestPanelProtocol:
    @pytest.mark.parametrize(
        "panel", [FileTreePanel(), DiagnosticsPanel(), TerminalPanel(), DuckPanel()]
    )
    def test_implementations_are_panels(self, panel):
        assert is_panel(panel)

    def test_incomplete_object_is_not_a_panel(self):
        class NoRender:
            def title(self):
                return "x"

        assert not is_panel(NoRender())
        assert not is_panel("panel")

    def test_titles_are_constant(self):
        panel = DiagnosticsPanel()
        first = panel.title()
        panel.toggle_visibility()
        assert panel.title() == first == "Diagnostics"
        assert FileTreePanel().title() == "Files"
        assert TerminalPanel().title() == "Terminal"

    def test_toggle_visibility_only_flips(self):
        panel = FileTreePanel()
        selected = panel.selected_index
        panel.toggle_visibility()
        assert not panel.is_visible()
        assert panel.selected_index == selected
        panel.toggle_visibility()
        assert panel.is_visible()


class TestPanelPosition:
    def test_coerce_from_string(self):
        assert PanelPosition.coerce("left") is PanelPosition.LEFT
        assert PanelPosition.coerce(" FLOATING ") is PanelPosition.FLOATING

    def test_coerce_passes_through_members(self):
        assert PanelPosition.coerce(PanelPosition.BOTTOM) is PanelPosition.BOTTOM

    def test_coerce_rejects_unknown(self):
        with pytest.raises(ValueError, match="Must be one of"):
            PanelPosition.coerce("center")

    def test_closed_set(self):
        assert [p.value for p in PanelPosition] == ["left", "right", "bottom", "floating"]


class TestPanelLayout:
    def test_assign_and_lookup(self):
        layout = PanelLayout()
        layout.assign("a", PanelPosition.LEFT)
        layout.assign("b", PanelPosition.BOTTOM)
        layout.assign("c", PanelPosition.BOTTOM)

        assert layout.position_of("a") is PanelPosition.LEFT
        assert layout.position_of("zzz") is None
        assert layout.ids_at(PanelPosition.BOTTOM) == ["b", "c"]
        assert layout.ids_at(PanelPosition.RIGHT) == []
        assert len(layout) == 3
        assert "a" in layout

    def test_has_visible(self):
        layout = PanelLayout()
        panels = {
            "shown": RecordingPanel(),
            "hidden": RecordingPanel(visible=False),
        }
        layout.assign("shown", PanelPosition.LEFT)
        layout.assign("hidden", PanelPosition.BOTTOM)

        assert layout.has_visible(PanelPosition.LEFT, panels)
        assert not layout.has_visible(PanelPosition.BOTTOM, panels)
        assert not layout.has_visible(PanelPosition.RIGHT, panels)

    def test_has_visible_ignores_unregistered_ids(self):
        layout = PanelLayout()
        layout.assign("ghost", PanelPosition.LEFT)
        assert not layout.has_visible(PanelPosition.LEFT, {})
