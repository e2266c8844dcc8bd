#!/usr/bin/env python3
"""
Main CLI entry point for paneldash
"""

from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table
from textual.geometry import Region

from paneldash import __version__
from paneldash.config.ui_config import (
    LayoutConfig,
    get_active_panel,
    get_layout,
    get_shortcuts,
)
from paneldash.exceptions import ConfigurationError, PaneldashError
from paneldash.ui.canvas import Canvas
from paneldash.ui.dashboard import DashboardApp, build_default_manager
from paneldash.ui.layout import PanelManager
from paneldash.utils.logging_utils import setup_tui_logging
from paneldash.utils.output import console

app = typer.Typer(
    help="paneldash - terminal dashboard of independently rendering panels",
    no_args_is_help=True,
)

_state = {"verbose": False}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
):
    """
    paneldash - terminal dashboard of independently rendering panels

    [bold]Examples:[/bold]

    Start the dashboard:
        [cyan]paneldash run[/cyan]

    Show how an 80x24 screen is divided with diagnostics open:
        [cyan]paneldash layout --show diagnostics[/cyan]
    """
    _state["verbose"] = verbose


def _resolve_layout(
    left_width: Optional[int], right_width: Optional[int], bottom_height: Optional[int]
) -> LayoutConfig:
    """Config file extents with command-line overrides applied."""
    layout = get_layout()
    if left_width is not None:
        layout["left_width"] = left_width
    if right_width is not None:
        layout["right_width"] = right_width
    if bottom_height is not None:
        layout["bottom_height"] = bottom_height
    return layout


def _show_panels(manager: PanelManager, panel_ids: List[str]) -> None:
    for panel_id in panel_ids:
        panel = manager.get(panel_id)
        if panel is None:
            raise ConfigurationError(
                "Unknown panel", panel_id=panel_id, known=manager.panel_ids()
            )
        if not panel.is_visible():
            manager.toggle(panel_id)


def _fail(error: PaneldashError) -> typer.Exit:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    return typer.Exit(1)


LEFT_WIDTH_OPTION = typer.Option(None, "--left-width", help="Width of the left column")
RIGHT_WIDTH_OPTION = typer.Option(None, "--right-width", help="Width of the right column")
BOTTOM_HEIGHT_OPTION = typer.Option(None, "--bottom-height", help="Height of the bottom row")


@app.command()
def run(
    left_width: Optional[int] = LEFT_WIDTH_OPTION,
    right_width: Optional[int] = RIGHT_WIDTH_OPTION,
    bottom_height: Optional[int] = BOTTOM_HEIGHT_OPTION,
):
    """Start the interactive dashboard"""
    logger = setup_tui_logging(verbose=_state["verbose"])
    try:
        manager = build_default_manager(
            _resolve_layout(left_width, right_width, bottom_height),
            active_panel=get_active_panel(),
        )
        dashboard = DashboardApp(manager, get_shortcuts())
    except PaneldashError as e:
        logger.error(f"Could not start dashboard: {e}")
        raise _fail(e) from e

    dashboard.run()


@app.command()
def layout(
    width: int = typer.Option(80, "--width", "-w", min=0, help="Screen width in cells"),
    height: int = typer.Option(24, "--height", min=0, help="Screen height in cells"),
    show: Optional[List[str]] = typer.Option(None, "--show", "-s", help="Panel id to make visible"),
    left_width: Optional[int] = LEFT_WIDTH_OPTION,
    right_width: Optional[int] = RIGHT_WIDTH_OPTION,
    bottom_height: Optional[int] = BOTTOM_HEIGHT_OPTION,
):
    """Print the regions each position gets on a screen of the given size"""
    try:
        manager = build_default_manager(_resolve_layout(left_width, right_width, bottom_height))
        _show_panels(manager, show or [])
    except PaneldashError as e:
        raise _fail(e) from e

    regions = manager.compute_layout(Region(0, 0, width, height))

    table = Table(title=f"Layout {width}x{height}")
    table.add_column("Position", style="cyan", no_wrap=True)
    table.add_column("Panel", style="magenta")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Width", justify="right", style="green")
    table.add_column("Height", justify="right", style="green")

    for position, region in regions.items():
        table.add_row(
            position.value,
            manager.front_panel_id(position) or "-",
            str(region.x),
            str(region.y),
            str(region.width),
            str(region.height),
        )
    console.print(table)


@app.command()
def snapshot(
    width: int = typer.Option(80, "--width", "-w", min=0, help="Screen width in cells"),
    height: int = typer.Option(24, "--height", min=0, help="Screen height in cells"),
    show: Optional[List[str]] = typer.Option(None, "--show", "-s", help="Panel id to make visible"),
    left_width: Optional[int] = LEFT_WIDTH_OPTION,
    right_width: Optional[int] = RIGHT_WIDTH_OPTION,
    bottom_height: Optional[int] = BOTTOM_HEIGHT_OPTION,
):
    """Render a single frame of the dashboard to the terminal"""
    try:
        manager = build_default_manager(_resolve_layout(left_width, right_width, bottom_height))
        _show_panels(manager, show or [])
    except PaneldashError as e:
        raise _fail(e) from e

    canvas = Canvas(width, height)
    manager.render(canvas)
    console.print(canvas)


@app.command()
def version():
    """Show paneldash version"""
    typer.echo(f"paneldash version {__version__}")


def run_cli():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run_cli()
