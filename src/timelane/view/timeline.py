# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from timelane.color import GRID_COLOR, LANE_LABEL_COLOR, LANE_TEXT_COLOR, lane_color
from timelane.model.item import PositionedItem
from timelane.model.layout import TimelineLayout
from timelane.time import datetime_to_display_date_str
from timelane.view.header import header

LANE_LABEL_WIDTH = 5


def rendered_width(width: float, min_item_width: float) -> float:
    """Pixel width an item box is drawn at. Also covers inverted items."""
    return max(min_item_width, width - 2)


def timeline_view(
    layout: TimelineLayout,
    min_item_width: float = 20,
    console: Optional[Console] = None,
) -> None:
    """
    Draw a timeline layout in the terminal.

    The pixel geometry of the layout is scaled onto the console width. The top
    row carries the tick labels, then one row per lane with its number and
    item boxes, colored by lane.

    Args:
        layout: The layout to draw
        min_item_width: Minimum pixel width of an item box
        console: Console to print to (defaults to a new one)
    """
    header(f"{layout['view_mode']} timeline")

    if console is None:
        console = Console()

    if not layout["items"]:
        console.print("\n[dim]No timeline items to display.[/dim]\n")
        return

    date_range_str = (
        f"{datetime_to_display_date_str(layout['display_min'])} to "
        f"{datetime_to_display_date_str(layout['display_max'])}"
    )
    console.print(
        f"\n[bold]{date_range_str}[/bold] "
        f"(lanes: {layout['lane_count']}, view: {layout['view_mode']})\n"
    )

    columns = max(console.width - LANE_LABEL_WIDTH, 1)
    scale = columns / layout["content_width"]
    left_padding = layout["left_padding"]

    tick_columns = [
        _to_column(tick["position"] - left_padding, scale, columns)
        for tick in layout["ticks"]
    ]
    tick_labels = [tick["label"] for tick in layout["ticks"]]

    chart_elements = [
        _build_tick_label_row(tick_columns, tick_labels, columns),
        _build_separator_row(tick_columns, columns),
    ]

    for lane in range(layout["lane_count"]):
        lane_items = [item for item in layout["items"] if item["lane"] == lane]
        chart_elements.append(
            _build_lane_row(
                lane,
                lane_items,
                tick_columns,
                columns,
                scale,
                left_padding,
                min_item_width,
            )
        )

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))


def _to_column(pixels: float, scale: float, columns: int) -> int:
    return min(max(int(pixels * scale), 0), columns - 1)


def _build_tick_label_row(
    tick_columns: list[int], tick_labels: list[str], columns: int
) -> Text:
    """Place tick labels left to right, dropping any that would collide."""
    cells = [" "] * columns
    next_free = 0

    for column, label in zip(tick_columns, tick_labels):
        if column + len(label) > columns:
            column = columns - len(label)
        if column < next_free or column < 0:
            continue
        cells[column : column + len(label)] = list(label)
        next_free = column + len(label) + 1

    row = Text(" " * LANE_LABEL_WIDTH)
    row.append("".join(cells), style="bold")
    return row


def _build_separator_row(tick_columns: list[int], columns: int) -> Text:
    cells = ["─"] * columns
    for column in tick_columns:
        cells[column] = "┬"

    row = Text("─" * LANE_LABEL_WIDTH, style="dim")
    row.append("".join(cells), style="dim")
    return row


def _build_lane_row(
    lane: int,
    lane_items: list[PositionedItem],
    tick_columns: list[int],
    columns: int,
    scale: float,
    left_padding: float,
    min_item_width: float,
) -> Text:
    cells: list[tuple[str, Optional[str]]] = [(" ", None)] * columns
    for column in tick_columns:
        cells[column] = ("│", GRID_COLOR)

    color = lane_color(lane)
    for item in lane_items:
        start = _to_column(item["position"] - left_padding, scale, columns)
        span = max(1, round(rendered_width(item["width"], min_item_width) * scale))
        end = min(start + span, columns)

        label = f" {item['name']}"[: end - start].ljust(end - start)
        for offset, char in enumerate(label):
            cells[start + offset] = (char, f"{LANE_TEXT_COLOR} on {color}")

    row = Text(f"{lane + 1:>3}  ", style=LANE_LABEL_COLOR)
    for char, style in cells:
        row.append(char, style=style)
    return row
