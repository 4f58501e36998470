# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class Item(TypedDict):
    name: str
    start: pendulum.DateTime
    end: pendulum.DateTime


class LanedItem(Item):
    lane: int


class PositionedItem(LanedItem):
    position: float
    width: float
