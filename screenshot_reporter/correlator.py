"""Correlation of capture references with the spec that produced them."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass(kw_only=True)
class ArtifactCorrelator:
    """Accumulates capture references for the in-flight spec.

    References are kept in creation order. ``drain`` hands the whole batch to
    exactly one metadata record and starts a fresh batch for the next spec.
    """

    _pending: list[str] = field(default_factory=list)

    def record(self, ref: str) -> None:
        log.debug("Recorded capture %s", ref)
        self._pending.append(ref)

    def drain(self) -> Sequence[str]:
        """Return the recorded references and reset the accumulator."""
        drained = tuple(self._pending)
        self._pending.clear()
        log.debug("Drained %d capture(s)", len(drained))
        return drained

    def __len__(self) -> int:
        return len(self._pending)
