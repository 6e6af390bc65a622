"""Pytest configuration for TunePicker."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tune_picker.catalog import Catalog


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    del config
    if os.environ.get("TUNE_PICKER_CI") != "1":
        return
    skip_vlc = pytest.mark.skip(reason="Skipping VLC-dependent tests in CI.")
    for item in items:
        if "vlc" in item.keywords:
            item.add_marker(skip_vlc)


def make_catalog(*names: str) -> Catalog:
    return Catalog.from_paths(Path("/music") / name for name in names)


@pytest.fixture
def abc_catalog() -> Catalog:
    return make_catalog("a.mp3", "b.mp3", "c.mp3")
