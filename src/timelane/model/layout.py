# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from timelane.model.item import PositionedItem
from timelane.model.view_mode import ViewMode


class DateRange(TypedDict):
    min_date: pendulum.DateTime
    max_date: pendulum.DateTime


class DisplayRange(TypedDict):
    display_min: pendulum.DateTime
    display_max: pendulum.DateTime


class Tick(TypedDict):
    date: pendulum.DateTime
    position: float
    label: str


class TimelineLayout(TypedDict):
    items: list[PositionedItem]
    lane_count: int
    min_date: pendulum.DateTime
    max_date: pendulum.DateTime
    display_min: pendulum.DateTime
    display_max: pendulum.DateTime
    view_mode: ViewMode
    content_width: float
    left_padding: float
    ticks: list[Tick]
