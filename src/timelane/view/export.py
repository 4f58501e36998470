# SPDX-License-Identifier: MIT

from typing import Any, Optional

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timelane.model.layout import TimelineLayout
from timelane.time import datetime_to_iso_str


def layout_to_dict(
    layout: TimelineLayout, lane_height: Optional[int] = None
) -> dict[str, Any]:
    """Convert a layout to plain data with ISO-8601 dates for external renderers."""
    data: dict[str, Any] = {
        "view_mode": layout["view_mode"],
        "lane_count": layout["lane_count"],
        "min_date": datetime_to_iso_str(layout["min_date"]),
        "max_date": datetime_to_iso_str(layout["max_date"]),
        "display_min": datetime_to_iso_str(layout["display_min"]),
        "display_max": datetime_to_iso_str(layout["display_max"]),
        "content_width": float(layout["content_width"]),
        "left_padding": float(layout["left_padding"]),
    }
    if lane_height is not None:
        data["lane_height"] = lane_height

    data["items"] = [
        {
            "name": item["name"],
            "start": datetime_to_iso_str(item["start"]),
            "end": datetime_to_iso_str(item["end"]),
            "lane": item["lane"],
            "position": float(item["position"]),
            "width": float(item["width"]),
        }
        for item in layout["items"]
    ]
    data["ticks"] = [
        {
            "date": datetime_to_iso_str(tick["date"]),
            "position": float(tick["position"]),
            "label": tick["label"],
        }
        for tick in layout["ticks"]
    ]
    return data


def layout_to_yaml(layout: TimelineLayout, lane_height: Optional[int] = None) -> str:
    return dump(layout_to_dict(layout, lane_height), Dumper=Dumper, sort_keys=False)
