"""Abstract base class for the browser automation collaborator."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

type Capabilities = Mapping[str, Any]
type LogEntry = Mapping[str, Any]


class WebDriverError(RuntimeError):
    """Raised when the automation driver rejects a command."""


class CaptureError(WebDriverError):
    """Raised when a screenshot could not be taken."""


class TargetClosedError(CaptureError):
    """Raised when the browser window targeted by a command is already closed."""


class BrowserSession(ABC):
    """Automation session the reporter queries for artifacts.

    Implementations raise ``TargetClosedError`` when the window is gone and
    ``WebDriverError`` for every other driver-side failure.
    """

    @abstractmethod
    async def get_capabilities(self) -> Capabilities:
        """Return the capability map of the running session."""

    @abstractmethod
    async def take_screenshot(self) -> bytes:
        """Capture the current window and return PNG bytes."""

    @abstractmethod
    async def get_browser_logs(self) -> Sequence[LogEntry]:
        """Return browser console log entries collected since the last call."""
