"""Tests for the textual dashboard host."""

import pytest

from paneldash.config.constants import DEFAULT_SHORTCUTS
from paneldash.exceptions import ConfigurationError
from paneldash.ui.dashboard import (
    DashboardApp,
    DashboardView,
    build_default_manager,
    resolve_shortcuts,
)
from paneldash.ui.panels import PanelPosition
from panel_fixtures import key


@pytest.fixture
def view():
    manager = build_default_manager()
    return DashboardView(manager, resolve_shortcuts({"ctrl+d": "diagnostics"}, manager))


class TestDefaultManager:
    def test_stock_panels(self):
        manager = build_default_manager()
        assert manager.panel_ids() == ["file_tree", "diagnostics", "terminal"]
        assert manager.position_of("file_tree") is PanelPosition.LEFT
        assert manager.position_of("terminal") is PanelPosition.BOTTOM
        assert manager.visible_ids() == ["file_tree"]
        assert manager.active_id == "file_tree"

    def test_layout_extents_applied(self):
        manager = build_default_manager(
            {"left_width": 12, "right_width": 0, "bottom_height": 4}, active_panel=None
        )
        assert manager.left_width == 12
        assert manager.bottom_height == 4
        assert manager.active_id is None


class TestResolveShortcuts:
    def test_parses_keys(self):
        manager = build_default_manager()
        resolved = resolve_shortcuts({"ctrl+t": "terminal"}, manager)
        assert resolved == {key("ctrl+t"): "terminal"}

    def test_unknown_panel(self):
        with pytest.raises(ConfigurationError, match="unknown panel"):
            resolve_shortcuts({"ctrl+x": "nope"}, build_default_manager())

    def test_bad_key(self):
        with pytest.raises(ConfigurationError, match="Unknown modifier"):
            resolve_shortcuts({"hyper+x": "terminal"}, build_default_manager())


class TestRouteKey:
    def test_navigation_goes_to_active_panel(self, view):
        assert view.route_key(key("down"))
        assert view.panel_manager.get("file_tree").selected_index == 1

    def test_shortcut_shows_and_activates(self, view):
        assert view.route_key(key("ctrl+d"))
        manager = view.panel_manager
        assert manager.get("diagnostics").is_visible()
        assert manager.active_id == "diagnostics"
        assert manager.front_panel_id(PanelPosition.BOTTOM) == "diagnostics"

    def test_hiding_active_panel_moves_focus(self, view):
        view.route_key(key("ctrl+d"))
        view.route_key(key("ctrl+d"))
        manager = view.panel_manager
        assert not manager.get("diagnostics").is_visible()
        assert manager.active_id == "file_tree"

    def test_keys_reach_newly_active_panel(self, view):
        view.route_key(key("ctrl+d"))
        view.route_key(key("down"))
        assert view.panel_manager.get("diagnostics").selected_index == 1
        assert view.panel_manager.get("file_tree").selected_index == 0

    def test_covered_panel_ignores_keys(self):
        manager = build_default_manager()
        view = DashboardView(manager, resolve_shortcuts(DEFAULT_SHORTCUTS, manager))
        view.route_key(key("ctrl+d"))
        view.route_key(key("ctrl+t"))
        assert manager.front_panel_id(PanelPosition.BOTTOM) == "terminal"
        assert manager.active_id == "terminal"

        assert view.route_key(key("down"))
        assert manager.get("diagnostics").selected_index == 0
        assert manager.get("file_tree").selected_index == 1

    def test_tab_cycles_active(self, view):
        view.route_key(key("ctrl+d"))
        assert view.route_key(key("tab"))
        assert view.panel_manager.active_id == "file_tree"
        view.route_key(key("tab"))
        assert view.panel_manager.active_id == "diagnostics"

    def test_unhandled_key(self, view):
        assert not view.route_key(key("x"))

    def test_toggle_unknown_panel_is_noop(self, view):
        view.toggle_panel("nope")
        assert view.panel_manager.active_id == "file_tree"


class TestDashboardApp:
    @pytest.mark.asyncio
    async def test_mounts_and_renders_file_tree(self):
        app = DashboardApp(build_default_manager())
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            view = pilot.app.query_one(DashboardView)
            assert pilot.app.focused is view
            text = "\n".join(view.render().plain_lines())
            assert "Files" in text
            assert "main.rs" in text

    @pytest.mark.asyncio
    async def test_shortcut_opens_bottom_panel(self):
        app = DashboardApp(build_default_manager())
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("ctrl+d")
            await pilot.pause()
            manager = pilot.app.panel_manager
            assert manager.get("diagnostics").is_visible()
            assert manager.active_id == "diagnostics"
            text = "\n".join(pilot.app.query_one(DashboardView).render().plain_lines())
            assert "Diagnostics" in text

    @pytest.mark.asyncio
    async def test_navigation_keys(self):
        app = DashboardApp(build_default_manager())
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("down", "down", "up")
            await pilot.pause()
            assert pilot.app.panel_manager.get("file_tree").selected_index == 1

    @pytest.mark.asyncio
    async def test_tab_switches_active_panel(self):
        app = DashboardApp(build_default_manager())
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("ctrl+t")
            await pilot.press("tab")
            await pilot.pause()
            assert pilot.app.panel_manager.active_id == "file_tree"

    def test_rejects_bad_shortcuts(self):
        with pytest.raises(ConfigurationError):
            DashboardApp(build_default_manager(), {"ctrl+z": "missing"})
