# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import TypedDict

import platformdirs

APP_NAME = "timelane"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    default_view_mode: str
    viewport_width: int
    left_padding: int
    lane_height: int
    min_item_width: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "default_view_mode": "monthly",
        "viewport_width": 800,
        "left_padding": 60,
        "lane_height": 50,
        "min_item_width": 20,
        "log_level": "WARNING",
    }
