# SPDX-License-Identifier: MIT

import logging
from typing import Callable

import pendulum

from timelane.model.layout import Tick
from timelane.model.view_mode import ViewMode
from timelane.service.coordinates import to_pixel_position

logger = logging.getLogger(__name__)


def generate_ticks(
    display_min: pendulum.DateTime,
    display_max: pendulum.DateTime,
    view_mode: ViewMode,
    content_width: float,
    left_padding: float,
) -> list[Tick]:
    """
    Walk the display range one period at a time and emit labeled axis ticks.

    - daily: every day from display_min, labeled "Jan 5"
    - weekly: every Monday from the first Monday on or after display_min,
      labeled "Mar 11"
    - monthly: the 1st of every month, labeled "Mar 2024"
    - yearly: January 1 of every year, labeled "2024"

    Args:
        display_min: Start of the display range
        display_max: End of the display range (inclusive)
        view_mode: Period used for stepping and labels
        content_width: Pixel width of the timeline body
        left_padding: Pixels added to every tick position

    Returns:
        Ticks in date order
    """
    current = _anchor(display_min, view_mode)
    increment = _increment(view_mode)
    label_format = _label_format(view_mode)

    ticks: list[Tick] = []
    while current <= display_max:
        position = to_pixel_position(current, display_min, display_max, content_width)
        ticks.append(
            {
                "date": current,
                "position": position + left_padding,
                "label": current.format(label_format),
            }
        )
        current = increment(current)

    logger.debug("generated %d %s ticks", len(ticks), view_mode)
    return ticks


def _anchor(display_min: pendulum.DateTime, view_mode: ViewMode) -> pendulum.DateTime:
    if view_mode == "daily":
        return display_min
    elif view_mode == "weekly":
        # 0=Sunday .. 6=Saturday
        weekday = display_min.isoweekday() % 7
        days_until_monday = 1 if weekday == 0 else (8 - weekday) % 7
        return display_min.add(days=days_until_monday)
    elif view_mode == "monthly":
        return display_min.start_of("month")
    elif view_mode == "yearly":
        return display_min.start_of("year")
    raise ValueError(f"Unknown view mode {view_mode!r}")


def _increment(
    view_mode: ViewMode,
) -> Callable[[pendulum.DateTime], pendulum.DateTime]:
    if view_mode == "daily":
        return lambda d: d.add(days=1)
    elif view_mode == "weekly":
        return lambda d: d.add(weeks=1)
    elif view_mode == "monthly":
        return lambda d: d.add(months=1)
    return lambda d: d.add(years=1)


def _label_format(view_mode: ViewMode) -> str:
    if view_mode == "daily" or view_mode == "weekly":
        return "MMM D"
    elif view_mode == "monthly":
        return "MMM YYYY"
    return "YYYY"
