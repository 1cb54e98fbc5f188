"""Models for the metadata record emitted for each completed spec."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import Field

from screenshot_reporter.models.base import Model


class BrowserInfo(Model):
    """Browser identity taken from the session capabilities."""

    name: str | None = None
    version: str | None = None


class Metadata(Model):
    """Structured result describing one spec's outcome and artifacts."""

    description: str
    passed: bool
    pending: bool = False
    os: str | None = None
    session_id: str | None = None
    instance_id: int
    browser: BrowserInfo = Field(default_factory=BrowserInfo)
    message: str | Sequence[str] | None = None
    trace: str | Sequence[str] | None = None
    screen_shot_file: Sequence[str] | None = None
    browser_logs: Sequence[Mapping[str, Any]] = Field(default_factory=tuple)
    timestamp: int | None = Field(
        default=None, description="Spec start, milliseconds since the epoch"
    )
    duration: int | None = Field(default=None, description="Milliseconds")

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize using wire names, leaving out unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
