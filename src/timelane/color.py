# SPDX-License-Identifier: MIT

# Lane background colors, cycled by lane index
LANE_COLORS = [
    "light_sky_blue1",
    "plum2",
    "aquamarine1",
    "light_slate_blue",
    "pale_turquoise1",
    "dark_sea_green2",
    "violet",
    "sky_blue1",
]

LANE_TEXT_COLOR = "grey15"
GRID_COLOR = "grey35"
LANE_LABEL_COLOR = "grey62"


def lane_color(lane: int) -> str:
    return LANE_COLORS[lane % len(LANE_COLORS)]
