"""Naming strategies for spec artifacts."""

from screenshot_reporter.naming.builders import (
    PathBuilder,
    descriptive_path_builder,
    guid_path_builder,
)
from screenshot_reporter.naming.loading import (
    PathBuilderNotFoundError,
    load_path_builder,
)
from screenshot_reporter.naming.paths import ArtifactPaths, derive_paths

__all__ = [
    "ArtifactPaths",
    "PathBuilder",
    "PathBuilderNotFoundError",
    "derive_paths",
    "descriptive_path_builder",
    "guid_path_builder",
    "load_path_builder",
]
