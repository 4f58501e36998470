# SPDX-License-Identifier: MIT

import logging

import pendulum

from timelane.model.item import Item, LanedItem

logger = logging.getLogger(__name__)


def assign_lanes(items: list[Item]) -> list[list[Item]]:
    """
    Partition items into lanes so that no two items in a lane overlap.

    Items are taken in start order (stable, so equal starts keep their input
    order) and each one goes into the first lane whose last item ends strictly
    before it starts. An item ending on the same instant another starts
    overlaps it. Greedy first fit by start date is optimal for intervals: the
    lane count equals the largest number of items overlapping at one instant.

    Args:
        items: Items to place. The list is not modified.

    Returns:
        Lanes in creation order, each holding its items in assignment order
    """
    if not items:
        return []

    sorted_items = sorted(items, key=lambda item: item["start"])
    lanes: list[list[Item]] = []

    for item in sorted_items:
        for lane in lanes:
            if lane[-1]["end"] < item["start"]:
                lane.append(item)
                break
        else:
            lanes.append([item])

    logger.debug("assigned %d items to %d lanes", len(items), len(lanes))
    return lanes


def assign_lane_indices(items: list[Item]) -> list[LanedItem]:
    """Annotate each item with its lane index, listed lane by lane."""
    laned_items: list[LanedItem] = []
    for lane_index, lane in enumerate(assign_lanes(items)):
        for item in lane:
            laned_items.append(
                {
                    "name": item["name"],
                    "start": item["start"],
                    "end": item["end"],
                    "lane": lane_index,
                }
            )
    return laned_items


def lane_count(laned_items: list[LanedItem]) -> int:
    if not laned_items:
        return 0
    return max(item["lane"] for item in laned_items) + 1


def max_overlap(items: list[Item]) -> int:
    """
    Largest number of items whose closed [start, end] intervals share an instant.

    Sweeps start and end points; at equal instants starts are counted before
    ends since closed intervals touching at a point overlap.
    """
    points: list[tuple[pendulum.DateTime, int]] = []
    for item in items:
        points.append((item["start"], 0))
        points.append((item["end"], 1))
    points.sort()

    current = 0
    peak = 0
    for _, kind in points:
        if kind == 0:
            current += 1
            peak = max(peak, current)
        else:
            current -= 1
    return peak
