# SPDX-License-Identifier: MIT

import datetime
import logging
from pathlib import Path
from typing import Any, Optional

import pendulum
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from timelane.model.item import Item
from timelane.time import datetime_from_str, python_to_pendulum_utc

logger = logging.getLogger(__name__)


class ItemRepository:
    """
    Reads timeline items from a YAML (or JSON) file.

    The document is either a list of items or a mapping with an "items" list.
    Each item needs a name, a start and an end. Dates may be ISO-8601 strings
    or YAML dates.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._items: Optional[list[Item]] = None

    @property
    def items(self) -> list[Item]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        try:
            document = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise ValueError(f"{self.path}: {e}") from e

        if document is None:
            raw_items: Any = []
        elif isinstance(document, dict):
            raw_items = document.get("items") or []
        else:
            raw_items = document

        if not isinstance(raw_items, list):
            raise ValueError(f"{self.path}: expected a list of items")

        self._items = [
            _item_from_raw(index, raw_item) for index, raw_item in enumerate(raw_items)
        ]
        logger.debug("loaded %d items from %s", len(self._items), self.path)

    def get_items(self) -> list[Item]:
        return list(self.items)


def _item_from_raw(index: int, raw_item: Any) -> Item:
    if not isinstance(raw_item, dict):
        raise ValueError(f"item {index} is not a mapping")

    for field in ("name", "start", "end"):
        if raw_item.get(field) is None:
            raise ValueError(f"item {index} is missing '{field}'")

    return {
        "name": str(raw_item["name"]),
        "start": _date_from_raw(raw_item["start"]),
        "end": _date_from_raw(raw_item["end"]),
    }


def _date_from_raw(value: Any) -> pendulum.DateTime:
    if isinstance(value, datetime.date):
        return python_to_pendulum_utc(value)
    return datetime_from_str(str(value))
