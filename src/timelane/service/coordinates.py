# SPDX-License-Identifier: MIT

import pendulum

from timelane.model.view_mode import PIXELS_PER_DAY, ViewMode
from timelane.time import days_between


def total_span_days(
    range_min: pendulum.DateTime, range_max: pendulum.DateTime
) -> float:
    # Inclusive of the last day; never zero so callers can divide by it
    return days_between(range_min, range_max) + 1 or 1


def to_pixel_position(
    date: pendulum.DateTime,
    range_min: pendulum.DateTime,
    range_max: pendulum.DateTime,
    content_width: float,
) -> float:
    """
    Map a date to its horizontal offset in the content area.

    The offset excludes any left padding. Time of day is kept, so the result
    may fall between day boundaries.
    """
    offset_days = days_between(range_min, date)
    return offset_days / total_span_days(range_min, range_max) * content_width


def to_pixel_width(
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    range_min: pendulum.DateTime,
    range_max: pendulum.DateTime,
    content_width: float,
) -> float:
    """
    Map an item's span to a pixel width.

    Day counts are inclusive: an item starting and ending on the same day is
    one day wide. An item ending before it starts yields a width below one
    day, possibly negative, which renderers are expected to clamp.
    """
    item_days = days_between(start, end) + 1
    return item_days / total_span_days(range_min, range_max) * content_width


def content_width(
    range_min: pendulum.DateTime,
    range_max: pendulum.DateTime,
    view_mode: ViewMode,
    viewport_width: float,
    left_padding: float,
) -> float:
    """
    Width of the scrollable timeline body.

    Never narrower than the viewport minus the left padding; wider when the
    span at the view mode's pixel density needs more room.
    """
    calculated_width = total_span_days(range_min, range_max) * PIXELS_PER_DAY[view_mode]
    return max(calculated_width, viewport_width - left_padding)
