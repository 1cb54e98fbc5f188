"""WebDriver browser session implementation."""

import base64
import binascii
import json
import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from screenshot_reporter.browser.base import (
    BrowserSession,
    Capabilities,
    CaptureError,
    LogEntry,
    TargetClosedError,
    WebDriverError,
)
from screenshot_reporter.browser.config import WebDriverConfig

log = logging.getLogger(__name__)

NO_SUCH_WINDOW = "no such window"
SESSION_ID_CAPABILITY = "webdriver.remote.sessionid"


@dataclass(frozen=True, kw_only=True)
class WebDriverSession(BrowserSession):
    """Browser session driven over the W3C WebDriver HTTP protocol."""

    config: WebDriverConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: WebDriverConfig
    ) -> AsyncGenerator["WebDriverSession", None]:
        """Create session with managed HTTP client lifecycle."""
        async with aiohttp.ClientSession(
            base_url=config.url,
            headers={"Content-Type": "application/json; charset=utf-8"},
        ) as session:
            yield cls(config=config, session=session)

    @property
    def _session_path(self) -> str:
        return f"/session/{self.config.session_id}"

    async def get_capabilities(self) -> Capabilities:
        """Return configured capabilities or query them from the remote end."""
        if self.config.capabilities is not None:
            capabilities = dict(self.config.capabilities)
        else:
            value = await self._command("GET", self._session_path, "get capabilities")
            capabilities = dict(value.get("capabilities", value))

        capabilities.setdefault(SESSION_ID_CAPABILITY, self.config.session_id)
        return capabilities

    async def take_screenshot(self) -> bytes:
        """Capture the current top-level browsing context as PNG bytes."""
        value = await self._command(
            "GET",
            f"{self._session_path}/screenshot",
            "take screenshot",
            error_cls=CaptureError,
        )
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, TypeError) as exc:
            raise CaptureError(f"Invalid screenshot payload: {exc}") from exc

    async def get_browser_logs(self) -> Sequence[LogEntry]:
        """Fetch console log entries of the configured log type."""
        value = await self._command(
            "POST",
            f"{self._session_path}/se/log",
            "get browser logs",
            payload={"type": self.config.log_type},
        )
        log.debug("Fetched %d browser log entries", len(value))
        return list(value)

    async def _command(
        self,
        method: str,
        path: str,
        command: str,
        *,
        payload: dict[str, Any] | None = None,
        error_cls: type[WebDriverError] = WebDriverError,
    ) -> Any:
        async with self.session.request(method, path, json=payload) as response:
            if response.status != 200:
                text = await response.text()
                raise error_from_response(response.status, text, command, error_cls)
            data = await response.json()
        return data["value"]


def error_from_response(
    status: int,
    text: str,
    command: str,
    error_cls: type[WebDriverError] = WebDriverError,
) -> WebDriverError:
    """Build the exception matching a WebDriver error response."""
    try:
        error = json.loads(text)["value"]["error"]
    except (ValueError, KeyError, TypeError):
        error = None

    message = f"Failed to {command}: {status} {text}"
    if error == NO_SUCH_WINDOW:
        return TargetClosedError(message)
    return error_cls(message)
