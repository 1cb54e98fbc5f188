"""Report storage module."""

from screenshot_reporter.storage.base import (
    ReportOptions,
    ReportStorage,
    SortKey,
    default_sort_key,
)
from screenshot_reporter.storage.filesystem import (
    COMBINED_REPORT,
    REPORT_OPTIONS,
    FileReportStorage,
    load_report,
)

__all__ = [
    "COMBINED_REPORT",
    "REPORT_OPTIONS",
    "FileReportStorage",
    "ReportOptions",
    "ReportStorage",
    "SortKey",
    "default_sort_key",
    "load_report",
]
