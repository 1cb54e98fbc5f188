"""Abstract base class for report storage collaborators."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from screenshot_reporter.models.metadata import Metadata
from screenshot_reporter.naming.builders import PathBuilder

type SortKey = Callable[[Metadata], Any]


def default_sort_key(metadata: Metadata) -> tuple[str, int]:
    """Order report entries by session, then by start time.

    Used with a stable sort, so ties keep their insertion order.
    """
    return (metadata.session_id or "", metadata.timestamp or 0)


@dataclass(frozen=True, kw_only=True)
class ReportOptions:
    """Options handed to the storage collaborator with every merge."""

    base_directory: Path
    path_builder: PathBuilder
    sort_key: SortKey = default_sort_key
    prepare_assets: bool = True
    screenshots_subfolder: str = ""
    exclude_skipped_specs: bool = False
    take_screenshots_only_for_failed_specs: bool = False
    take_screenshots_for_skipped_specs: bool = False
    doc_title: str = "Test Results"
    doc_name: str = "report.html"
    css_override_file: str | None = None
    custom_css_inline: str | None = None
    client_defaults: Mapping[str, Any] = field(default_factory=dict)


class ReportStorage(ABC):
    """Durable storage for captures, metadata fragments and the report."""

    @abstractmethod
    def clear_directory(self, directory: Path) -> None:
        """Remove a previous run's output directory."""

    @abstractmethod
    def store_capture(self, data: bytes, path: Path) -> None:
        """Persist PNG bytes of one capture."""

    @abstractmethod
    def store_metadata_fragment(
        self, metadata: Metadata, path: Path, descriptions: Sequence[str]
    ) -> None:
        """Persist the metadata record of one spec on its own."""

    @abstractmethod
    def merge_into_report(
        self, metadata: Metadata, path: Path, options: ReportOptions
    ) -> None:
        """Merge one metadata record into the cumulative sorted report.

        Args:
            metadata: Record to merge
            path: Location of the spec's metadata file
            options: Report options; ``prepare_assets`` is only true for the
                first merge of a run

        """
