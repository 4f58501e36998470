# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from timelane.model.item import Item
from timelane.model.layout import DateRange, DisplayRange
from timelane.model.view_mode import ViewMode
from timelane.time import now_utc

logger = logging.getLogger(__name__)


def resolve_range(
    items: list[Item], now: Optional[pendulum.DateTime] = None
) -> DateRange:
    """
    Get the earliest and latest date across all items.

    Both the start and the end of every item take part, so an item whose end
    precedes its start still widens the range. With no items both bounds are
    the current time.

    Args:
        items: Items to span
        now: Fallback for empty input (defaults to the current time)

    Returns:
        The raw range of item dates
    """
    if not items:
        today = now if now is not None else now_utc()
        return {"min_date": today, "max_date": today}

    dates = [date for item in items for date in (item["start"], item["end"])]
    date_range: DateRange = {"min_date": min(dates), "max_date": max(dates)}
    logger.debug(
        "resolved range %s to %s", date_range["min_date"], date_range["max_date"]
    )
    return date_range


def snap_display_range(
    min_date: pendulum.DateTime, max_date: pendulum.DateTime, view_mode: ViewMode
) -> DisplayRange:
    """
    Snap the start of the range to a period boundary for coarse view modes.

    Yearly views start on January 1 and monthly views on the 1st of the month,
    both at midnight. Daily and weekly views keep the raw minimum. The end of
    the range is never moved.
    """
    if view_mode == "yearly":
        display_min = min_date.start_of("year")
    elif view_mode == "monthly":
        display_min = min_date.start_of("month")
    else:
        display_min = min_date

    return {"display_min": display_min, "display_max": max_date}
