# SPDX-License-Identifier: MIT

import datetime
import math
from typing import cast

import pendulum

SECONDS_PER_DAY = 24 * 60 * 60


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum_utc(python_value: datetime.date) -> pendulum.DateTime:
    if isinstance(python_value, datetime.datetime):
        pendulum_value = pendulum.instance(python_value, tz="UTC")
        return pendulum_value.in_tz("UTC")
    return pendulum.datetime(
        python_value.year, python_value.month, python_value.day, tz="UTC"
    )


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    """Parse an ISO-8601 date or datetime. Date-only input is midnight UTC.

    Raises the parser's ValueError for anything it cannot read.
    """
    parsed = pendulum.parse(datetime, tz="UTC")
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"Not a calendar date: {datetime!r}")
    return cast(pendulum.DateTime, parsed).in_tz("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD")


def days_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    return (end - start).total_seconds() / SECONDS_PER_DAY


def inclusive_day_count(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Whole days covered by an item, counting both the start and end day."""
    return math.ceil(days_between(start, end)) + 1


def duration_to_str(days: int) -> str:
    return f"{days} day{'s' if days != 1 else ''}"
