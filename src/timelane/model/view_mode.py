# SPDX-License-Identifier: MIT

from typing import Literal, cast, get_args

ViewMode = Literal["daily", "weekly", "monthly", "yearly"]

VIEW_MODES: tuple[ViewMode, ...] = get_args(ViewMode)

# Zoom level per view mode. Changing these changes rendered geometry.
PIXELS_PER_DAY: dict[ViewMode, float] = {
    "daily": 50,
    "weekly": 15,
    "monthly": 5,
    "yearly": 1.5,
}


def ensure_view_mode(value: str) -> ViewMode:
    if value not in VIEW_MODES:
        raise ValueError(
            f"Unknown view mode {value!r}, expected one of: {', '.join(VIEW_MODES)}"
        )
    return cast(ViewMode, value)
