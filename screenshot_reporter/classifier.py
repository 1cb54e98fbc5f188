"""Classification of raw spec results into canonical outcomes."""

from collections.abc import Sequence

from screenshot_reporter.models.outcome import Outcome
from screenshot_reporter.models.result import (
    Expectation,
    ItemResult,
    ItemsResult,
    RawResult,
    StatusResult,
)

PASSED_MESSAGE = "Passed"
PENDING_MESSAGE = "Pending"
FAILED_MESSAGE = "Failed"
NO_STACK_TRACE = "No Stack trace information"


class ClassificationContractViolation(Exception):
    """Raised when a result claims failure without any failed expectation."""


def classify(result: RawResult) -> Outcome:
    """Map a raw result of any supported shape to an Outcome.

    Raises:
        ClassificationContractViolation: If a failed result carries no
            failed expectation entries.

    """
    match result:
        case StatusResult():
            return _classify_status(result)
        case ItemsResult():
            return _classify_items(result)
        case ItemResult():
            return _classify_item(result)
    raise TypeError(f"Unsupported result type: {type(result).__name__}")


def _classify_status(result: StatusResult) -> Outcome:
    if result.is_passed:
        return _passed(result.passed_expectations[:1])
    if result.is_pending:
        return Outcome(
            status="pending", message=result.pending_reason or PENDING_MESSAGE
        )
    return _failed(result.id, result.failed_expectations)


def _classify_items(result: ItemsResult) -> Outcome:
    if result.passed:
        return _passed(result.items[:1])
    return _failed(result.id, [item for item in result.items if not item.passed])


def _classify_item(result: ItemResult) -> Outcome:
    item = [result.item] if result.item is not None else []
    if result.passed:
        return _passed(item)

    outcome = _failed(result.id, item)
    # A single item never aggregates; unwrap the one-element lists.
    return Outcome(
        status="failed",
        message=_single(outcome.message),
        trace=_single(outcome.trace),
    )


def _passed(expectations: Sequence[Expectation]) -> Outcome:
    first = expectations[0] if expectations else None
    if first is None:
        return Outcome(status="passed", message=PASSED_MESSAGE)
    return Outcome(
        status="passed",
        message=first.message or PASSED_MESSAGE,
        trace=first.stack,
    )


def _failed(spec_id: str, expectations: Sequence[Expectation]) -> Outcome:
    if not expectations:
        raise ClassificationContractViolation(
            f"Spec {spec_id!r} is reported as failed "
            "but has no failed expectations"
        )

    first = expectations[0]
    message: str | Sequence[str] = (
        tuple(e.message or "" for e in expectations)
        if first.message
        else FAILED_MESSAGE
    )
    trace: str | Sequence[str] = (
        tuple(e.stack or "" for e in expectations) if first.stack else NO_STACK_TRACE
    )
    return Outcome(status="failed", message=message, trace=trace)


def _single(value: str | Sequence[str] | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value[0]
