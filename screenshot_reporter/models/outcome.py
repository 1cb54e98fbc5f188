"""Canonical classification of a spec result."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

type OutcomeStatus = Literal["passed", "failed", "pending"]


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """Status, message and trace derived from a raw result."""

    status: OutcomeStatus
    message: str | Sequence[str]
    trace: str | Sequence[str] | None = None

    @property
    def passed(self) -> bool:
        return self.status == "passed"

    @property
    def pending(self) -> bool:
        return self.status == "pending"
