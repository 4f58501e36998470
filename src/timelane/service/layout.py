# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from functools import lru_cache
from typing import Optional

import pendulum

from timelane.model.item import Item, PositionedItem
from timelane.model.layout import TimelineLayout
from timelane.model.view_mode import ViewMode, ensure_view_mode
from timelane.service.coordinates import (
    content_width as compute_content_width,
    to_pixel_position,
    to_pixel_width,
)
from timelane.service.date_range import resolve_range, snap_display_range
from timelane.service.lanes import assign_lane_indices, lane_count
from timelane.service.ticks import generate_ticks

logger = logging.getLogger(__name__)

DEFAULT_LEFT_PADDING = 60

ItemKey = tuple[tuple[str, pendulum.DateTime, pendulum.DateTime], ...]


def layout_timeline(
    items: list[Item],
    view_mode: ViewMode,
    viewport_width: float,
    left_padding: float = DEFAULT_LEFT_PADDING,
    now: Optional[pendulum.DateTime] = None,
) -> TimelineLayout:
    """
    Lay out items on a timeline.

    Assigns lanes, resolves and snaps the date range, sizes the content area
    for the view mode and positions every item and axis tick. Nothing is kept
    between calls.

    Args:
        items: Items to lay out
        view_mode: "daily", "weekly", "monthly" or "yearly"
        viewport_width: Visible width in pixels, including the left padding
        left_padding: Pixels reserved left of the content for lane labels
        now: Range bounds used when there are no items (defaults to now)

    Returns:
        The complete layout for renderers
    """
    view_mode = ensure_view_mode(view_mode)

    laned_items = assign_lane_indices(items)
    date_range = resolve_range(items, now=now)
    display_range = snap_display_range(
        date_range["min_date"], date_range["max_date"], view_mode
    )
    display_min = display_range["display_min"]
    display_max = display_range["display_max"]

    width = compute_content_width(
        display_min, display_max, view_mode, viewport_width, left_padding
    )

    positioned_items: list[PositionedItem] = []
    for item in laned_items:
        positioned_items.append(
            {
                "name": item["name"],
                "start": item["start"],
                "end": item["end"],
                "lane": item["lane"],
                "position": to_pixel_position(
                    item["start"], display_min, display_max, width
                )
                + left_padding,
                "width": to_pixel_width(
                    item["start"], item["end"], display_min, display_max, width
                ),
            }
        )

    ticks = generate_ticks(display_min, display_max, view_mode, width, left_padding)

    layout: TimelineLayout = {
        "items": positioned_items,
        "lane_count": lane_count(laned_items),
        "min_date": date_range["min_date"],
        "max_date": date_range["max_date"],
        "display_min": display_min,
        "display_max": display_max,
        "view_mode": view_mode,
        "content_width": width,
        "left_padding": left_padding,
        "ticks": ticks,
    }
    logger.debug(
        "laid out %d items in %d lanes over %.1fpx (%s)",
        len(positioned_items),
        layout["lane_count"],
        width,
        view_mode,
    )
    return layout


def cached_layout_timeline(
    items: list[Item],
    view_mode: ViewMode,
    viewport_width: float,
    left_padding: float = DEFAULT_LEFT_PADDING,
) -> TimelineLayout:
    """
    Same as layout_timeline, memoized on the items, view mode and widths.

    Empty input is not cached since its range depends on the current time.
    """
    if not items:
        return layout_timeline(items, view_mode, viewport_width, left_padding)

    key: ItemKey = tuple((item["name"], item["start"], item["end"]) for item in items)
    return deepcopy(_layout_from_key(key, view_mode, viewport_width, left_padding))


def clear_layout_cache() -> None:
    _layout_from_key.cache_clear()


@lru_cache(maxsize=32)
def _layout_from_key(
    key: ItemKey,
    view_mode: ViewMode,
    viewport_width: float,
    left_padding: float,
) -> TimelineLayout:
    items: list[Item] = [
        {"name": name, "start": start, "end": end} for name, start, end in key
    ]
    return layout_timeline(items, view_mode, viewport_width, left_padding)
