# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import typer

from timelane.model.view_mode import ViewMode, ensure_view_mode

VIEW_MODE_ALIASES: dict[str, ViewMode] = {
    "d": "daily",
    "day": "daily",
    "w": "weekly",
    "week": "weekly",
    "m": "monthly",
    "month": "monthly",
    "y": "yearly",
    "year": "yearly",
}

OUTPUT_FORMATS = ["chart", "table", "yaml"]


def parse_view_mode(view_mode_param: Optional[str]) -> Optional[ViewMode]:
    if view_mode_param is None:
        return None

    view_mode = view_mode_param.strip().lower()
    if view_mode in VIEW_MODE_ALIASES:
        return VIEW_MODE_ALIASES[view_mode]

    try:
        return ensure_view_mode(view_mode)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def parse_output_format(format_param: Optional[str]) -> Optional[str]:
    if format_param is None:
        return None

    output_format = format_param.strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Format must be one of {', '.join(OUTPUT_FORMATS)}, got '{format_param}'"
        )
    return output_format


def parse_log_level(level_param: Optional[str]) -> Optional[str]:
    if level_param is None:
        return None

    level = level_param.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(f"Unknown log level '{level_param}'")
    return level
