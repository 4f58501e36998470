import io

import pytest
import yaml
from rich.console import Console

from timelane import state as app_state
from timelane.service.layout import layout_timeline
from timelane.view.export import layout_to_dict, layout_to_yaml
from timelane.view.items import items_view
from timelane.view.timeline import rendered_width, timeline_view

from conftest import make_item


@pytest.fixture
def console():
    app_state.set_show_header(False)
    yield Console(file=io.StringIO(), width=100, record=True)
    app_state.set_show_header(True)


def test_rendered_width_is_clamped():
    assert rendered_width(370, 20) == 368
    assert rendered_width(10, 20) == 20
    assert rendered_width(-50, 20) == 20


def test_chart_draws_lanes_and_ticks(example_items, console):
    layout = layout_timeline(example_items, "daily", 800)

    timeline_view(layout, console=console)
    text = console.export_text()

    assert "2024-01-01 to 2024-01-10" in text
    assert "lanes: 2" in text
    assert "Jan 1" in text
    lines = text.splitlines()
    assert any(line.startswith("  1  ") for line in lines)
    assert any(line.startswith("  2  ") for line in lines)
    assert not any(line.startswith("  3  ") for line in lines)


def test_chart_for_no_items(console):
    timeline_view(layout_timeline([], "monthly", 800), console=console)

    assert "No timeline items to display." in console.export_text()


def test_item_table_shows_durations(console):
    items = [
        make_item("Kickoff", "2024-01-01", "2024-01-05"),
        make_item("Review", "2024-01-08", "2024-01-08"),
    ]

    items_view(layout_timeline(items, "monthly", 800), console=console)
    text = console.export_text()

    assert "Kickoff" in text
    assert "5 days" in text
    assert "1 day" in text
    assert "2024-01-08" in text


def test_layout_export_is_plain_data(example_items):
    layout = layout_timeline(example_items, "weekly", 800)

    data = layout_to_dict(layout, lane_height=50)

    assert data["view_mode"] == "weekly"
    assert data["lane_count"] == 2
    assert data["lane_height"] == 50
    assert data["display_min"] == "2024-01-01T00:00:00+00:00"
    assert [item["name"] for item in data["items"]] == ["A", "C", "B"]
    assert data["ticks"][0]["label"] == "Jan 1"


def test_layout_yaml_round_trips_through_safe_load(example_items):
    layout = layout_timeline(example_items, "monthly", 800)

    data = yaml.safe_load(layout_to_yaml(layout))

    assert data["content_width"] == 740
    assert data["items"][0]["width"] == pytest.approx(370)
    assert "lane_height" not in data
