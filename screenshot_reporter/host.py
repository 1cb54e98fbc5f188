"""Registration contract offered by the host test runner."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from screenshot_reporter.models.result import Expectation

type BarrierHook = Callable[[], Awaitable[None]]
type ExpectationListener = Callable[[bool, Expectation], None]


class HostRunner(ABC):
    """Hooks a test runner exposes to reporters.

    The runner awaits barrier hooks before starting each spec and once after
    the last one. Expectation listeners are called for every expectation
    result while a spec runs.
    """

    @abstractmethod
    def before_each_spec(self, hook: BarrierHook) -> None:
        """Register a hook awaited before every spec."""

    @abstractmethod
    def after_all_specs(self, hook: BarrierHook) -> None:
        """Register a hook awaited after the last spec."""

    @abstractmethod
    def add_expectation_listener(self, listener: ExpectationListener) -> None:
        """Register a listener for expectation results."""
