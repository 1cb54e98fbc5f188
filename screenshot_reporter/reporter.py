"""Screenshot reporter observing a test run's lifecycle."""

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Any

from screenshot_reporter.browser.base import (
    BrowserSession,
    Capabilities,
    TargetClosedError,
    WebDriverError,
)
from screenshot_reporter.config import ReporterConfig
from screenshot_reporter.correlator import ArtifactCorrelator
from screenshot_reporter.diagnostics import gather_browser_logs
from screenshot_reporter.host import HostRunner
from screenshot_reporter.metadata_builders import DEFAULT_METADATA_BUILDERS
from screenshot_reporter.models.result import Expectation, RawResult, SuiteResult
from screenshot_reporter.naming.paths import ArtifactPaths, derive_paths
from screenshot_reporter.serializer import LifecycleSerializer
from screenshot_reporter.storage.base import ReportOptions, ReportStorage
from screenshot_reporter.storage.filesystem import FileReportStorage
from screenshot_reporter.suite_context import SuiteContext

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class ScreenshotReporter:
    """Produces a capture and a metadata record for every completed spec.

    Lifecycle hooks only enqueue work; the work itself runs one handler at a
    time through a ``LifecycleSerializer`` so suite bookkeeping and capture
    correlation always observe events in the order the runner sent them.
    """

    config: ReporterConfig
    browser: BrowserSession = field(repr=False)
    storage: ReportStorage = field(default_factory=FileReportStorage, repr=False)
    clock: Callable[[], datetime] = field(default=_utcnow, repr=False)

    _serializer: LifecycleSerializer = field(
        default_factory=LifecycleSerializer, init=False, repr=False
    )
    _suites: SuiteContext = field(default_factory=SuiteContext, init=False)
    _correlator: ArtifactCorrelator = field(
        default_factory=ArtifactCorrelator, init=False, repr=False
    )
    _started: dict[str, datetime] = field(default_factory=dict, init=False)
    _report_options: ReportOptions = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._report_options = self.config.report_options()

    @classmethod
    def from_options(
        cls,
        *,
        browser: BrowserSession,
        storage: ReportStorage | None = None,
        **options: Any,
    ) -> "ScreenshotReporter":
        """Create a reporter from keyword options.

        Raises:
            ConfigurationError: If the options are missing or invalid

        """
        config = ReporterConfig.from_options(**options)
        if storage is None:
            return cls(config=config, browser=browser)
        return cls(config=config, browser=browser, storage=storage)

    def on_run_start(self, host: HostRunner) -> None:
        """Install quiescence barriers and, if enabled, the failure listener."""
        if not self.config.preserve_directory:
            self.storage.clear_directory(self.config.base_directory)

        host.before_each_spec(self.wait_idle)
        host.after_all_specs(self.wait_idle)
        if self.config.screenshot_on_failure:
            host.add_expectation_listener(self.on_expectation_result)

    def on_suite_start(self, result: SuiteResult) -> None:
        async def handler() -> None:
            self._suites.push(result.description)

        self._serializer.notify(handler)

    def on_suite_end(self, result: SuiteResult) -> None:
        async def handler() -> None:
            self._suites.pop()

        self._serializer.notify(handler)

    def on_spec_start(self, result: RawResult) -> None:
        async def handler() -> None:
            self._started[result.id] = self.clock()

        self._serializer.notify(handler)

    def on_spec_end(self, result: RawResult) -> None:
        async def handler() -> None:
            await self._finalize_spec(result)

        self._serializer.notify(handler)

    def on_expectation_result(self, passed: bool, expectation: Expectation) -> None:
        if passed or not self.config.screenshot_on_failure:
            return

        async def handler() -> None:
            await self._capture_failed_expectation(expectation)

        self._serializer.notify(handler)

    async def wait_idle(self) -> None:
        """Quiescence barrier: wait for all enqueued lifecycle work."""
        await self._serializer.wait_idle()

    async def _finalize_spec(self, result: RawResult) -> None:
        stopped = self.clock()
        started = self._started.pop(result.id, stopped)

        if result.is_pending and self.config.exclude_skipped_specs:
            if stray := len(self._correlator):
                log.warning(
                    "Discarding %d capture(s) of excluded spec %s", stray, result.id
                )
            self._correlator.drain()
            log.debug("Skipping report for excluded spec %s", result.id)
            return

        capabilities = await self._query_capabilities()
        browser_logs = (
            await gather_browser_logs(self.browser, capabilities)
            if self.config.gather_browser_logs
            else ()
        )

        descriptions = self._suites.descriptions(result.description)
        base_name = self.config.path_builder(descriptions, result, capabilities)
        builder = self.config.metadata_builders.get(
            result.kind, DEFAULT_METADATA_BUILDERS[result.kind]
        )
        metadata = builder(descriptions, result, capabilities)
        paths = derive_paths(
            base_name,
            self.config.base_directory,
            self.config.screenshots_subfolder,
            self.config.jsons_subfolder,
        )

        if self._should_capture(result):
            await self._capture(paths)
        # Last step needing captures: everything recorded so far belongs here.
        captures = self._correlator.drain()

        metadata = metadata.model_copy(
            update={
                "screen_shot_file": captures or None,
                "browser_logs": browser_logs,
                "timestamp": int(started.timestamp() * 1000),
                "duration": (stopped - started) // timedelta(milliseconds=1),
            }
        )

        self.storage.store_metadata_fragment(
            metadata, paths.fragment_path, descriptions
        )
        self.storage.merge_into_report(
            metadata, paths.metadata_path, self._report_options
        )
        self._report_options = replace(self._report_options, prepare_assets=False)

        log.info(
            "Reported spec '%s': passed=%s pending=%s captures=%d",
            metadata.description,
            metadata.passed,
            metadata.pending,
            len(captures),
        )

    async def _query_capabilities(self) -> Capabilities:
        """Return the session capabilities, or none when the browser is gone.

        The record is still emitted without environment details.
        """
        try:
            return await self.browser.get_capabilities()
        except TargetClosedError:
            log.warning(
                "Could not query capabilities because target window is already closed"
            )
        except WebDriverError as exc:
            log.error("Could not query capabilities: %s", exc, exc_info=exc)
        return {}

    def _should_capture(self, result: RawResult) -> bool:
        if self.config.take_screenshots_only_for_failed_specs and result.is_passed:
            return False
        if result.is_pending:
            return self.config.take_screenshots_for_skipped_specs
        return True

    async def _capture_failed_expectation(self, expectation: Expectation) -> None:
        base_name = self.config.path_builder([expectation.message or ""], None, None)
        paths = derive_paths(
            base_name,
            self.config.base_directory,
            self.config.screenshots_subfolder,
            capture_name=str(uuid.uuid4()),
        )
        await self._capture(paths)

    async def _capture(self, paths: ArtifactPaths) -> None:
        try:
            png = await self.browser.take_screenshot()
            self.storage.store_capture(png, paths.capture_path)
        except TargetClosedError:
            log.warning(
                "Could not take the screenshot because target window is already closed"
            )
        except Exception as exc:
            log.error("Could not take the screenshot: %s", exc, exc_info=exc)
        else:
            self._correlator.record(paths.capture_ref)
