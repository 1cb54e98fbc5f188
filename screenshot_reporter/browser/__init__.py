"""Browser automation collaborator module."""

from screenshot_reporter.browser.base import (
    BrowserSession,
    Capabilities,
    CaptureError,
    LogEntry,
    TargetClosedError,
    WebDriverError,
)
from screenshot_reporter.browser.config import WebDriverConfig
from screenshot_reporter.browser.webdriver import WebDriverSession

__all__ = [
    "BrowserSession",
    "Capabilities",
    "CaptureError",
    "LogEntry",
    "TargetClosedError",
    "WebDriverConfig",
    "WebDriverError",
    "WebDriverSession",
]
