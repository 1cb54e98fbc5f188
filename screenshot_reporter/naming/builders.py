"""Built-in naming strategies for spec artifacts."""

import hashlib
import re
import uuid
from collections.abc import Callable, Sequence

from screenshot_reporter.browser.base import Capabilities
from screenshot_reporter.models.result import RawResult

type PathBuilder = Callable[
    [Sequence[str], RawResult | None, Capabilities | None], str
]

UNSAFE_CHARACTERS = re.compile(r"[^\w\-.]+")


def guid_path_builder(
    descriptions: Sequence[str],
    result: RawResult | None,
    capabilities: Capabilities | None,
) -> str:
    """Return a globally unique base name."""
    return str(uuid.uuid4())


def descriptive_path_builder(
    descriptions: Sequence[str],
    result: RawResult | None,
    capabilities: Capabilities | None,
) -> str:
    """Return a readable base path mirroring the suite hierarchy.

    Suites become directories and the spec description becomes the file stem.
    A short digest of the full description path and browser keeps names
    distinct when sanitizing collapses two descriptions into the same text.
    """
    parts = [sanitize(description) for description in descriptions] or ["spec"]
    browser_name = (capabilities or {}).get("browserName") or ""
    digest = hashlib.sha1(
        "\0".join([*descriptions, str(browser_name)]).encode()
    ).hexdigest()[:8]
    return "/".join([*parts[:-1], f"{parts[-1]}-{digest}"])


def sanitize(text: str) -> str:
    """Make a description safe to use as a single path segment."""
    cleaned = UNSAFE_CHARACTERS.sub("_", text.strip()).strip("._")
    return cleaned[:100] or "_"
