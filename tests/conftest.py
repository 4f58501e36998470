from pathlib import Path
from typing import Iterator

import pendulum
import pytest

from timelane import configuration
from timelane import state as app_state
from timelane.model.item import Item
from timelane.repository.configuration import CONFIGURATION_REPO


def day(value: str) -> pendulum.DateTime:
    """Midnight UTC on an ISO date, the way item files are read."""
    return pendulum.parse(value, tz="UTC")  # type: ignore[return-value]


def make_item(name: str, start: str, end: str) -> Item:
    return {"name": name, "start": day(start), "end": day(end)}


@pytest.fixture
def example_items() -> list[Item]:
    """Three items where C fits after A and B needs its own lane"""
    return [
        make_item("A", "2024-01-01", "2024-01-05"),
        make_item("B", "2024-01-03", "2024-01-10"),
        make_item("C", "2024-01-06", "2024-01-08"),
    ]


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a temporary file and start from a clean repository"""
    path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    yield path
    app_state.set_show_header(True)
