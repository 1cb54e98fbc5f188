"""Default builders turning a raw result into a metadata record."""

import os
from collections.abc import Callable, Mapping, Sequence

from screenshot_reporter.browser.base import Capabilities
from screenshot_reporter.classifier import classify
from screenshot_reporter.models.metadata import BrowserInfo, Metadata
from screenshot_reporter.models.result import RawResult, ResultKind

type MetadataBuilder = Callable[[Sequence[str], RawResult, Capabilities], Metadata]


def default_metadata_builder(
    descriptions: Sequence[str],
    result: RawResult,
    capabilities: Capabilities,
) -> Metadata:
    """Build the metadata record for a spec from its classified outcome.

    Capture files, browser logs and timing are added by the reporter once
    they are known.
    """
    outcome = classify(result)
    return Metadata(
        description=" ".join(descriptions),
        passed=outcome.passed,
        pending=outcome.pending,
        os=_first(capabilities, "platform", "platformName"),
        session_id=capabilities.get("webdriver.remote.sessionid"),
        instance_id=os.getpid(),
        browser=BrowserInfo(
            name=capabilities.get("browserName"),
            version=_first(capabilities, "version", "browserVersion"),
        ),
        message=outcome.message,
        trace=outcome.trace,
    )


def _first(capabilities: Capabilities, *keys: str) -> str | None:
    for key in keys:
        if (value := capabilities.get(key)) is not None:
            return str(value)
    return None


DEFAULT_METADATA_BUILDERS: Mapping[ResultKind, MetadataBuilder] = {
    "status": default_metadata_builder,
    "items": default_metadata_builder,
    "item": default_metadata_builder,
}
