"""Models for raw spec results delivered by the host test runner.

Three event-source shapes are supported. Each carries an explicit ``kind``
discriminator so consumers match on the tag instead of probing for fields.
"""

from collections.abc import Sequence
from typing import Annotated, Literal

from pydantic import Field, TypeAdapter

from screenshot_reporter.models.base import Model

type SpecStatus = Literal["passed", "failed", "pending", "disabled", "excluded"]

PENDING_STATUSES: frozenset[str] = frozenset({"pending", "disabled", "excluded"})


class Expectation(Model):
    """A single expectation outcome reported by the runner."""

    passed: bool = True
    message: str | None = None
    stack: str | None = None
    matcher_name: str | None = None


class SuiteResult(Model):
    """Suite record delivered when a suite starts or finishes."""

    id: str
    description: str
    full_name: str = ""


class StatusResult(Model):
    """Result shape with a status string and expectation arrays."""

    kind: Literal["status"] = "status"
    id: str = Field(..., description="Runner-assigned spec identifier")
    description: str = ""
    full_name: str = ""
    status: str = Field(..., description="passed, failed, pending, ...")
    failed_expectations: Sequence[Expectation] = Field(default_factory=tuple)
    passed_expectations: Sequence[Expectation] = Field(default_factory=tuple)
    pending_reason: str | None = None

    @property
    def is_passed(self) -> bool:
        return self.status == "passed"

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_STATUSES


class ItemsResult(Model):
    """Result shape with a passed flag and an array of expectation items."""

    kind: Literal["items"] = "items"
    id: str
    description: str = ""
    passed: bool
    items: Sequence[Expectation] = Field(default_factory=tuple)

    @property
    def is_passed(self) -> bool:
        return self.passed

    @property
    def is_pending(self) -> bool:
        return False


class ItemResult(Model):
    """Result shape with a passed flag and a single expectation item."""

    kind: Literal["item"] = "item"
    id: str
    description: str = ""
    passed: bool
    item: Expectation | None = None

    @property
    def is_passed(self) -> bool:
        return self.passed

    @property
    def is_pending(self) -> bool:
        return False


RawResult = Annotated[
    StatusResult | ItemsResult | ItemResult, Field(discriminator="kind")
]

raw_result_adapter: TypeAdapter[RawResult] = TypeAdapter(RawResult)

type ResultKind = Literal["status", "items", "item"]
