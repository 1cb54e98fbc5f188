"""Loading of naming strategies from entry points."""

from importlib.metadata import entry_points

from screenshot_reporter.naming.builders import PathBuilder

ENTRY_POINT_GROUP = "screenshot_reporter.path_builders"


class PathBuilderNotFoundError(Exception):
    """Raised when a naming strategy is not found."""


def load_path_builder(key: str) -> PathBuilder:
    """Load a naming strategy by key.

    Args:
        key: The strategy key as registered in pyproject.toml
             (e.g., "guid", "descriptive")

    Returns:
        The path builder function

    Raises:
        PathBuilderNotFoundError: If no strategy with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            builder: PathBuilder = entry.load()
            return builder

    available = [e.name for e in entries]
    raise PathBuilderNotFoundError(
        f"Path builder '{key}' not found. Available path builders: {available}"
    )
