import random

import pytest

from timelane.model.item import Item
from timelane.service.lanes import (
    assign_lane_indices,
    assign_lanes,
    lane_count,
    max_overlap,
)

from conftest import day, make_item


def _names(lanes: list[list[Item]]) -> list[list[str]]:
    return [[item["name"] for item in lane] for lane in lanes]


def _random_items(seed: int, count: int) -> list[Item]:
    rng = random.Random(seed)
    items: list[Item] = []
    for index in range(count):
        start = day("2024-01-01").add(days=rng.randint(0, 60))
        items.append(
            {
                "name": f"item-{index}",
                "start": start,
                "end": start.add(days=rng.randint(0, 10)),
            }
        )
    return items


def test_later_item_reuses_first_free_lane(example_items):
    lanes = assign_lanes(example_items)

    assert _names(lanes) == [["A", "C"], ["B"]]


def test_no_items_means_no_lanes():
    assert assign_lanes([]) == []
    assert assign_lane_indices([]) == []
    assert lane_count([]) == 0


def test_single_item_gets_one_lane():
    lanes = assign_lanes([make_item("X", "2024-06-01", "2024-06-01")])

    assert _names(lanes) == [["X"]]


def test_identical_intervals_need_separate_lanes():
    items = [
        make_item("A", "2024-01-01", "2024-01-05"),
        make_item("B", "2024-01-01", "2024-01-05"),
    ]

    assert _names(assign_lanes(items)) == [["A"], ["B"]]


def test_end_on_next_start_counts_as_overlap():
    items = [
        make_item("A", "2024-01-01", "2024-01-05"),
        make_item("B", "2024-01-05", "2024-01-09"),
    ]

    assert _names(assign_lanes(items)) == [["A"], ["B"]]


def test_day_gap_shares_lane():
    items = [
        make_item("A", "2024-01-01", "2024-01-05"),
        make_item("B", "2024-01-06", "2024-01-09"),
    ]

    assert _names(assign_lanes(items)) == [["A", "B"]]


def test_equal_starts_keep_input_order():
    items = [
        make_item("late", "2024-02-01", "2024-02-02"),
        make_item("first", "2024-01-01", "2024-01-03"),
        make_item("second", "2024-01-01", "2024-01-02"),
    ]

    assert _names(assign_lanes(items)) == [["first", "late"], ["second"]]


def test_input_order_is_not_mutated(example_items):
    reversed_items = list(reversed(example_items))
    before = [item["name"] for item in reversed_items]

    assign_lanes(reversed_items)

    assert [item["name"] for item in reversed_items] == before


def test_lane_indices_are_listed_lane_by_lane(example_items):
    laned_items = assign_lane_indices(example_items)

    assert [(item["name"], item["lane"]) for item in laned_items] == [
        ("A", 0),
        ("C", 0),
        ("B", 1),
    ]
    assert lane_count(laned_items) == 2


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_items_in_a_lane_never_overlap(seed):
    for lane in assign_lanes(_random_items(seed, 40)):
        for previous, current in zip(lane, lane[1:]):
            assert previous["end"] < current["start"]


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_lane_count_matches_max_overlap(seed):
    items = _random_items(seed, 40)

    assert len(assign_lanes(items)) == max_overlap(items)


def test_adding_an_item_never_reduces_lane_count():
    items = _random_items(7, 30)

    counts = [len(assign_lanes(items[:size])) for size in range(len(items) + 1)]

    assert counts == sorted(counts)


def test_max_overlap_counts_touching_intervals():
    items = [
        make_item("A", "2024-01-01", "2024-01-05"),
        make_item("B", "2024-01-05", "2024-01-09"),
        make_item("C", "2024-01-10", "2024-01-11"),
    ]

    assert max_overlap(items) == 2
