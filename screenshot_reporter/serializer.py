"""Serialization of asynchronous lifecycle handlers in arrival order."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

log = logging.getLogger(__name__)

type Handler = Callable[[], Awaitable[None]]


@dataclass(kw_only=True)
class LifecycleSerializer:
    """Runs lifecycle handlers one at a time, in the order they were notified.

    The host runner delivers events without waiting for the previous handler
    to finish. Each notified handler is chained after the operation currently
    held, so the held operation always represents "everything enqueued so
    far". ``wait_idle`` is the quiescence barrier the host awaits before each
    spec and at the end of the run; it is the only place the held operation is
    released.

    A handler failure is not swallowed: handlers chained after it are skipped
    and the failure is raised from ``wait_idle``.
    """

    _current: asyncio.Task[None] | None = None
    _notified: int = 0

    def notify(self, handler: Handler) -> None:
        """Enqueue a handler. Must be called from within the running loop."""
        self._notified += 1
        if self._current is None:
            log.debug("Starting handler #%d", self._notified)
            self._current = asyncio.create_task(_run(handler))
        else:
            log.debug("Chaining handler #%d", self._notified)
            self._current = asyncio.create_task(_chain(self._current, handler))

    @property
    def busy(self) -> bool:
        return self._current is not None

    async def wait_idle(self) -> None:
        """Wait until every handler enqueued so far has settled."""
        while (current := self._current) is not None:
            try:
                await current
            finally:
                if self._current is current:
                    self._current = None


async def _run(handler: Handler) -> None:
    await handler()


async def _chain(previous: asyncio.Task[None], handler: Handler) -> None:
    await previous
    await handler()
