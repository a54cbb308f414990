"""Shared fixtures for dotlink tests."""

from pathlib import Path

import pytest
from loguru import logger

from dotlink.contexts.linking import LinkReporter


class RecordingReporter(LinkReporter):
    """LinkReporter that keeps every event instead of sending it to loguru."""

    def __init__(self):
        super().__init__()
        self.events = []

    def _log(self, level: str, message: str, fields: dict) -> None:
        self.events.append((level, message, fields))

    def at(self, level: str):
        return [(message, fields) for lvl, message, fields in self.events if lvl == level]

    def mentions(self, path: Path) -> bool:
        return any(path in fields.values() for _, _, fields in self.events)


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def dots(tmp_path):
    """Empty dotfiles directory."""
    path = tmp_path / "dots"
    path.mkdir()
    return path


@pytest.fixture
def home(tmp_path):
    """Empty home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop handlers added by a test so they never outlive its captured streams."""
    yield
    logger.remove()
