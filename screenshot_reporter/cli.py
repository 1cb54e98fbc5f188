"""CLI entry point summarizing a screenshot report."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Literal

from screenshot_reporter.config import load_config_file
from screenshot_reporter.models.metadata import Metadata
from screenshot_reporter.storage.filesystem import COMBINED_REPORT, load_report

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
    "pending": "⏸️",
}


def spec_status(metadata: Metadata) -> Literal["passed", "failed", "pending"]:
    """Derive the outcome status of a report entry."""
    if metadata.pending:
        return "pending"
    return "passed" if metadata.passed else "failed"


def log_results_summary(log: logging.Logger, entries: Sequence[Metadata]) -> None:
    """Log a formatted summary of reported specs with their captures."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for entry in entries:
        status = spec_status(entry)
        symbol = STATUS_SYMBOLS.get(status, "?")
        log.info(
            "%s %s: %s (%.2fs)",
            symbol,
            entry.description,
            status,
            (entry.duration or 0) / 1000,
        )
        if status == "failed" and entry.message:
            messages = (
                [entry.message] if isinstance(entry.message, str) else entry.message
            )
            for message in messages:
                log.info("  Message: %s", message)
        for capture in entry.screen_shot_file or ():
            log.info("  Screenshot: %s", capture)


def format_output(entries: Sequence[Metadata]) -> dict[str, Any]:
    """Format report entries for JSON output."""
    results: list[dict[str, Any]] = [
        {
            "description": entry.description,
            "status": spec_status(entry),
            "duration": entry.duration,
            "session_id": entry.session_id,
            "screenshots": list(entry.screen_shot_file or ()),
        }
        for entry in entries
    ]

    return {
        "total": len(results),
        "passed": sum(1 for r in results if r["status"] == "passed"),
        "failed": sum(1 for r in results if r["status"] == "failed"),
        "pending": sum(1 for r in results if r["status"] == "pending"),
        "results": results,
    }


def run(base_directory: Path) -> int:
    """Summarize the report in base_directory and return exit code."""
    log = logging.getLogger("screenshot_reporter")

    report_path = base_directory / COMBINED_REPORT
    log.info("Loading report: %s", report_path)
    entries = load_report(report_path)

    if not entries:
        log.info("No reported specs found")
        print(json.dumps(format_output([])))
        return 0

    log_results_summary(log, entries)
    print(json.dumps(format_output(entries), indent=2))

    return 1 if any(spec_status(entry) == "failed" for entry in entries) else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Summarize the results recorded by the screenshot reporter"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--base-directory",
        type=Path,
        help="Directory the reporter wrote its report into",
    )
    source.add_argument(
        "--config",
        type=Path,
        help="YAML reporter configuration naming the base directory",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.config is not None:
        base_directory = load_config_file(args.config).base_directory
    else:
        base_directory = args.base_directory

    sys.exit(run(base_directory))


if __name__ == "__main__":  # pragma: no cover
    main()
