"""Derivation of artifact file locations from a base name."""

import posixpath
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, kw_only=True)
class ArtifactPaths:
    """Locations of the files written for one spec."""

    capture_path: Path
    capture_ref: str
    metadata_path: Path
    fragment_path: Path


def derive_paths(
    base_name: str,
    base_directory: Path,
    screenshots_subfolder: str = "",
    jsons_subfolder: str = "",
    capture_name: str | None = None,
) -> ArtifactPaths:
    """Derive capture and metadata paths for a base name.

    The capture lands in ``<dir of base>/<screenshots_subfolder>`` and the
    metadata fragment in ``<dir of base>/<jsons_subfolder>``; the two
    subfolders are independent. ``capture_name`` overrides the capture file
    stem, which is used for extra captures sharing a spec's directory.
    """
    directory, stem = posixpath.split(base_name)
    capture_file = f"{capture_name or stem}.png"
    metadata_file = f"{stem}.json"

    capture_ref = posixpath.join(directory, screenshots_subfolder, capture_file)
    return ArtifactPaths(
        capture_path=base_directory / capture_ref,
        capture_ref=capture_ref,
        metadata_path=base_directory / directory / metadata_file,
        fragment_path=base_directory / directory / jsons_subfolder / metadata_file,
    )
