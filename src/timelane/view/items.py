# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from timelane.color import lane_color
from timelane.model.layout import TimelineLayout
from timelane.time import (
    datetime_to_display_date_str,
    duration_to_str,
    inclusive_day_count,
)
from timelane.view.header import header
from timelane.view.timeline import rendered_width


def items_view(
    layout: TimelineLayout,
    min_item_width: float = 20,
    console: Optional[Console] = None,
) -> None:
    header(f"{layout['view_mode']} items")

    if console is None:
        console = Console()

    if not layout["items"]:
        console.print("\n[dim]No timeline items to display.[/dim]\n")
        return

    items_table = Table(box=box.SIMPLE)
    items_table.add_column("lane", justify="right")
    items_table.add_column("name")
    items_table.add_column("start")
    items_table.add_column("end")
    items_table.add_column("duration", justify="right")
    items_table.add_column("position", justify="right")
    items_table.add_column("width", justify="right")

    for item in layout["items"]:
        color = lane_color(item["lane"])
        items_table.add_row(
            str(item["lane"] + 1),
            f"[{color}]{item['name']}[/{color}]",
            datetime_to_display_date_str(item["start"]),
            datetime_to_display_date_str(item["end"]),
            duration_to_str(inclusive_day_count(item["start"], item["end"])),
            f"{item['position']:.1f}",
            f"{rendered_width(item['width'], min_item_width):.1f}",
        )

    console.print(items_table)
    console.print(
        f"[dim]content width: {layout['content_width']:.1f}px, "
        f"ticks: {len(layout['ticks'])}[/dim]"
    )
