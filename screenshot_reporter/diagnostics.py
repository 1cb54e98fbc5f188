"""Retrieval of browser-side diagnostics for the current spec."""

import logging
import re
from collections.abc import Sequence

from screenshot_reporter.browser.base import (
    BrowserSession,
    Capabilities,
    LogEntry,
    TargetClosedError,
)

log = logging.getLogger(__name__)

# Only Chromium-family drivers expose the browser log endpoint.
SUPPORTED_BROWSERS = re.compile(r"chrome", re.IGNORECASE)


def supports_browser_logs(capabilities: Capabilities) -> bool:
    """Check whether the session's browser can deliver console logs."""
    browser_name = capabilities.get("browserName")
    return isinstance(browser_name, str) and bool(
        SUPPORTED_BROWSERS.search(browser_name)
    )


async def gather_browser_logs(
    browser: BrowserSession, capabilities: Capabilities
) -> Sequence[LogEntry]:
    """Fetch browser logs, or nothing for browsers that cannot provide them.

    A failing fetch is logged and yields no diagnostics so the spec's
    metadata is still emitted.
    """
    if not supports_browser_logs(capabilities):
        log.debug(
            "Skipping browser logs for browser=%s", capabilities.get("browserName")
        )
        return ()

    try:
        return tuple(await browser.get_browser_logs())
    except TargetClosedError:
        log.warning(
            "Could not gather browser logs because target window is already closed"
        )
    except Exception as exc:
        log.error("Could not gather browser logs: %s", exc, exc_info=exc)
    return ()
