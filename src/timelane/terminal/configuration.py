# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timelane import configuration
from timelane.repository.configuration import (
    CONFIGURATION_REPO,
)
from timelane.terminal.custom_typer import AliasedTyperGroup
from timelane.terminal.parse import parse_log_level, parse_view_mode

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(
    config: configuration.Configuration, title: Optional[str] = None
) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_view_mode", config["default_view_mode"])
    table.add_row("viewport_width", str(config["viewport_width"]))
    table.add_row("left_padding", str(config["left_padding"]))
    table.add_row("lane_height", str(config["lane_height"]))
    table.add_row("min_item_width", str(config["min_item_width"]))
    table.add_row("log_level", config["log_level"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
    default_view_mode: Annotated[
        Optional[str],
        typer.Option(
            "--default-view-mode",
            parser=parse_view_mode,
            help="valid inputs: daily, weekly, monthly, yearly (or d, w, m, y)",
        ),
    ] = None,
    viewport_width: Annotated[
        Optional[int],
        typer.Option(
            "--viewport-width",
            min=1,
            help="Available viewport width in pixels",
        ),
    ] = None,
    left_padding: Annotated[
        Optional[int],
        typer.Option(
            "--left-padding",
            min=0,
            help="Pixels reserved for lane labels left of the timeline",
        ),
    ] = None,
    lane_height: Annotated[
        Optional[int],
        typer.Option("--lane-height", min=1, help="Pixel height of one lane"),
    ] = None,
    min_item_width: Annotated[
        Optional[int],
        typer.Option(
            "--min-item-width",
            min=0,
            help="Minimum pixel width an item box is drawn at",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            parser=parse_log_level,
            help="valid inputs: DEBUG, INFO, WARNING, ERROR",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        default_view_mode=default_view_mode,
        viewport_width=viewport_width,
        left_padding=left_padding,
        lane_height=lane_height,
        min_item_width=min_item_width,
        log_level=log_level,
    )

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
