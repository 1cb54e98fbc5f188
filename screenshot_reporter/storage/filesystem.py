"""File-system implementation of report storage."""

import json
import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from screenshot_reporter.models.metadata import Metadata
from screenshot_reporter.storage.base import ReportOptions, ReportStorage

log = logging.getLogger(__name__)

COMBINED_REPORT = "combined.json"
REPORT_OPTIONS = "report-options.json"


@dataclass(frozen=True, kw_only=True)
class FileReportStorage(ReportStorage):
    """Writes captures and metadata as plain files below the base directory."""

    indent: int | None = 2

    def clear_directory(self, directory: Path) -> None:
        if directory.exists():
            log.info("Removing previous report directory %s", directory)
            shutil.rmtree(directory)

    def store_capture(self, data: bytes, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        log.debug("Stored capture %s (%d bytes)", path, len(data))

    def store_metadata_fragment(
        self, metadata: Metadata, path: Path, descriptions: Sequence[str]
    ) -> None:
        self._write_json(path, metadata.to_json_dict())
        log.debug("Stored metadata for '%s' at %s", " ".join(descriptions), path)

    def merge_into_report(
        self, metadata: Metadata, path: Path, options: ReportOptions
    ) -> None:
        report_path = options.base_directory / COMBINED_REPORT
        entries = [*load_report(report_path), metadata]
        entries.sort(key=options.sort_key)
        self._write_json(report_path, [entry.to_json_dict() for entry in entries])
        log.debug("Merged %s into %s (%d entries)", path, report_path, len(entries))

        if options.prepare_assets:
            self._write_json(
                options.base_directory / REPORT_OPTIONS, display_options(options)
            )

    def _write_json(self, path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=self.indent))


def load_report(report_path: Path) -> list[Metadata]:
    """Load the entries of a combined report, or none if it does not exist."""
    if not report_path.exists():
        return []
    with report_path.open() as f:
        data = json.load(f)
    return [Metadata.model_validate(entry) for entry in data]


def display_options(options: ReportOptions) -> dict[str, Any]:
    """Select the options that control how the report is presented."""
    return {
        "docTitle": options.doc_title,
        "docName": options.doc_name,
        "cssOverrideFile": options.css_override_file,
        "customCssInline": options.custom_css_inline,
        "clientDefaults": dict(options.client_defaults),
        "screenshotsSubfolder": options.screenshots_subfolder,
    }
