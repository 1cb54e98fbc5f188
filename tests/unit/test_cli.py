"""Tests for CLI module."""

import json
import logging
from pathlib import Path

import pytest

from screenshot_reporter.cli import (
    format_output,
    log_results_summary,
    run,
    spec_status,
)
from screenshot_reporter.models.metadata import Metadata
from screenshot_reporter.storage.filesystem import COMBINED_REPORT
from screenshot_reporter.testing.factories import MetadataFactory


def entry(
    description: str,
    *,
    passed: bool = True,
    pending: bool = False,
    **kwargs: object,
) -> Metadata:
    return MetadataFactory.build(
        description=description,
        passed=passed,
        pending=pending,
        duration=1500,
        session_id="s1",
        **kwargs,
    )


def write_report(base_directory: Path, *entries: Metadata) -> None:
    (base_directory / COMBINED_REPORT).write_text(
        json.dumps([e.to_json_dict() for e in entries])
    )


@pytest.mark.parametrize(
    ("passed", "pending", "expected"),
    [
        (True, False, "passed"),
        (False, False, "failed"),
        (False, True, "pending"),
    ],
)
def test_spec_status(passed: bool, pending: bool, expected: str) -> None:
    """Derives the status from the passed and pending flags."""
    assert spec_status(entry("spec", passed=passed, pending=pending)) == expected


def test_log_results_summary_passed(caplog: pytest.LogCaptureFixture) -> None:
    """Logs passed specs with checkmark symbol and captures."""
    entries = [entry("Login accepts", screen_shot_file=["abc.png"])]

    with caplog.at_level(logging.INFO):
        log_results_summary(logging.getLogger(), entries)

    assert "Test Results Summary:" in caplog.text
    assert "✅ Login accepts: passed (1.50s)" in caplog.text
    assert "Screenshot: abc.png" in caplog.text


def test_log_results_summary_failed_messages(caplog: pytest.LogCaptureFixture) -> None:
    """Logs every failure message of a failed spec."""
    entries = [
        entry("Login rejects", passed=False, message=["Expected 1 to be 2.", "boom"])
    ]

    with caplog.at_level(logging.INFO):
        log_results_summary(logging.getLogger(), entries)

    assert "❌ Login rejects: failed (1.50s)" in caplog.text
    assert "Message: Expected 1 to be 2." in caplog.text
    assert "Message: boom" in caplog.text


def test_format_output_empty() -> None:
    """Returns empty totals when no results."""
    assert format_output([]) == {
        "total": 0,
        "passed": 0,
        "failed": 0,
        "pending": 0,
        "results": [],
    }


def test_format_output_counts_statuses() -> None:
    """Counts entries per status."""
    output = format_output(
        [
            entry("a"),
            entry("b", passed=False, message="nope"),
            entry("c", passed=False, pending=True),
        ]
    )

    assert output["total"] == 3
    assert output["passed"] == 1
    assert output["failed"] == 1
    assert output["pending"] == 1
    assert output["results"][0] == {
        "description": "a",
        "status": "passed",
        "duration": 1500,
        "session_id": "s1",
        "screenshots": [],
    }


def test_run_without_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Returns 0 and empty totals when nothing was reported."""
    assert run(tmp_path) == 0

    assert json.loads(capsys.readouterr().out)["total"] == 0


def test_run_returns_1_on_failures(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Returns 1 when any spec failed."""
    write_report(tmp_path, entry("a"), entry("b", passed=False, message="nope"))

    assert run(tmp_path) == 1

    output = json.loads(capsys.readouterr().out)
    assert output["total"] == 2
    assert output["failed"] == 1


def test_run_returns_0_when_nothing_failed(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Pending specs do not fail the summary."""
    write_report(tmp_path, entry("a"), entry("b", passed=False, pending=True))

    assert run(tmp_path) == 0
