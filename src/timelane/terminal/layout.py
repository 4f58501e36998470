# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from timelane.model.view_mode import ensure_view_mode
from timelane.repository.configuration import CONFIGURATION_REPO
from timelane.repository.item import ItemRepository
from timelane.service.layout import layout_timeline
from timelane.terminal.parse import parse_output_format, parse_view_mode
from timelane.view.export import layout_to_yaml
from timelane.view.items import items_view
from timelane.view.timeline import timeline_view

logger = logging.getLogger(__name__)


def layout(
    path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="YAML or JSON file with items (name, start, end)",
        ),
    ],
    view_mode: Annotated[
        Optional[str],
        typer.Option(
            "--view-mode",
            "-m",
            parser=parse_view_mode,
            help="valid inputs: daily, weekly, monthly, yearly (or d, w, m, y)",
        ),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
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
    output_format: Annotated[
        Optional[str],
        typer.Option(
            "--format",
            "-f",
            parser=parse_output_format,
            help="valid inputs: chart, table, yaml",
        ),
    ] = None,
) -> None:
    """
    Lay out timeline items into lanes and show the result.
    """
    config = CONFIGURATION_REPO.get_config()

    try:
        resolved_view_mode = ensure_view_mode(view_mode or config["default_view_mode"])
        items = ItemRepository(path).get_items()
    except ValueError as e:
        logger.error("could not load %s: %s", path, e)
        Console(stderr=True).print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    timeline_layout = layout_timeline(
        items,
        resolved_view_mode,
        width if width is not None else config["viewport_width"],
        left_padding if left_padding is not None else config["left_padding"],
    )

    output_format = output_format or "chart"
    if output_format == "yaml":
        typer.echo(layout_to_yaml(timeline_layout, config["lane_height"]), nl=False)
    elif output_format == "table":
        items_view(timeline_layout, config["min_item_width"])
    else:
        timeline_view(timeline_layout, config["min_item_width"])
