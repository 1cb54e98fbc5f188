"""Fixtures for unit tests."""

from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

from screenshot_reporter.reporter import ScreenshotReporter
from screenshot_reporter.testing.fakes import (
    FakeBrowserSession,
    FakeHost,
    InMemoryStorage,
)

RUN_START = datetime(2099, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def browser() -> FakeBrowserSession:
    """Create fake browser session."""
    return FakeBrowserSession()


@pytest.fixture
def host() -> FakeHost:
    """Create fake host runner."""
    return FakeHost()


@pytest.fixture
def storage() -> InMemoryStorage:
    """Create in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Clock advancing 1.5 seconds on every reading."""
    ticks: Iterator[datetime] = (
        RUN_START + timedelta(milliseconds=1500 * i) for i in range(1000)
    )
    return lambda: next(ticks)


def joined_path_builder(
    descriptions: Any, result: Any, capabilities: Any
) -> str:
    """Deterministic naming strategy for assertions."""
    return "-".join(descriptions).replace(" ", "_")


@pytest.fixture
def make_reporter(
    browser: FakeBrowserSession,
    storage: InMemoryStorage,
    clock: Callable[[], datetime],
    tmp_path: Path,
) -> Callable[..., ScreenshotReporter]:
    """Return a function building reporters over the fake collaborators."""

    def _make(**options: Any) -> ScreenshotReporter:
        options.setdefault("base_directory", tmp_path / "report")
        options.setdefault("path_builder", joined_path_builder)
        reporter = ScreenshotReporter.from_options(
            browser=browser, storage=storage, **options
        )
        reporter.clock = clock
        return reporter

    return _make
