"""Consumer-handler adapter functions (Kafka-like flow without Kafka).

Mental model refresher:
- This is the controller-like entrypoint for event processing.
- Real Kafka code would call this after polling a record.
- Flow:
  record -> parse adapter -> application use-case -> commit/no-commit decision
- This module owns transport lifecycle behavior (parse errors, commit callbacks),
  not notification business rules.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from ..application.collaborators import Collaborators
from ..application.process import perform_return_notification
from ..errors import ReturnNotificationError
from .payload import parse_notification_request

Record = Mapping[str, Any]
CommitFn = Callable[[Record], None]
RejectFn = Callable[[Record, str], None]


def handle_message(
    record: Record,
    *,
    collaborators: Collaborators,
    commit: CommitFn,
    reject: RejectFn | None = None,
) -> dict[str, Any]:
    """Handle one incoming record and decide commit/no-commit.

    Commit policy:
    - Commit when the workflow returns a result (SMS failures included).
    - Client-input errors (status 400) are rejected as invalid requests.
    - Internal and dispatch errors (status 500) are rejected as failures.
    - Any other exception from a collaborator is rejected as a failure.
    - Parse failures are rejected and never reach the workflow.
    """
    try:
        payload = _get_record_payload(record)
        request = parse_notification_request(payload)
    except Exception as exc:
        error = f"parse_failed: {exc}"
        if reject is not None:
            reject(record, error)
        return _outcome(record, "parse_failed", None, False, error)

    try:
        result = perform_return_notification(request, collaborators)
    except ReturnNotificationError as exc:
        status = (
            "rejected_invalid_request" if exc.status_code < 500 else "processed_failed"
        )
        error = f"{type(exc).__name__}({exc.status_code}): {exc.message}"
        if reject is not None:
            reject(record, error)
        return _outcome(record, status, None, False, error)
    except Exception as exc:
        error = f"{type(exc).__name__}: {exc}"
        if reject is not None:
            reject(record, error)
        return _outcome(record, "processed_failed", None, False, error)

    commit(record)
    return _outcome(record, "processed_and_committed", result, True, None)


def handle_batch(
    records: Sequence[Record],
    *,
    collaborators: Collaborators,
    commit: CommitFn,
    reject: RejectFn | None = None,
) -> list[dict[str, Any]]:
    """Handle a batch of records sequentially using `handle_message`."""
    results: list[dict[str, Any]] = []
    for record in records:
        result = handle_message(
            record,
            collaborators=collaborators,
            commit=commit,
            reject=reject,
        )
        results.append(result)
    return results


def _outcome(
    record: Record,
    status: str,
    result: dict[str, Any] | None,
    should_commit: bool,
    error: str | None,
) -> dict[str, Any]:
    return {
        "status": status,
        "record_meta": _record_meta(record),
        "result": result,
        "should_commit": should_commit,
        "error": error,
    }


def _get_record_payload(record: Record) -> dict[str, Any]:
    payload = record.get("value")
    if not isinstance(payload, dict):
        raise ValueError("record.value must be a dict payload")
    return payload


def _record_meta(record: Record) -> dict[str, Any]:
    return {
        "topic": record.get("topic"),
        "partition": record.get("partition"),
        "offset": record.get("offset"),
    }
