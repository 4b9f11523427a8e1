#!/usr/bin/env python3
"""Run a Kafka-like consumer flow without Kafka."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from return_notifications.adapters import (  # noqa: E402
    dispatch_messages_via_console,
    load_directory_from_file,
    make_translator,
    send_client_notification_via_console,
)
from return_notifications.adapters.consumer_handler import handle_batch  # noqa: E402


def main() -> int:
    records = sample_records()
    committed_offsets: list[tuple[int, int]] = []
    rejected_offsets: list[tuple[int, int, str]] = []

    def commit(record: dict[str, Any]) -> None:
        partition = int(record.get("partition", -1))
        offset = int(record.get("offset", -1))
        committed_offsets.append((partition, offset))
        print(f"[COMMIT] partition={partition} offset={offset}")

    def reject(record: dict[str, Any], reason: str) -> None:
        partition = int(record.get("partition", -1))
        offset = int(record.get("offset", -1))
        rejected_offsets.append((partition, offset, reason))
        print(f"[NO-COMMIT] partition={partition} offset={offset} reason={reason}")

    directory = load_directory_from_file(REPO_ROOT / "scripts" / "sample_directory.json")
    collaborators = directory.collaborators(
        translate=make_translator(),
        dispatch_messages=dispatch_messages_maybe_fail,
        send_client_notification=send_client_notification_via_console,
    )

    results = handle_batch(
        records,
        collaborators=collaborators,
        commit=commit,
        reject=reject,
    )

    print("")
    print("[BATCH SUMMARY]")
    for result in results:
        meta = result["record_meta"]
        print(
            f"offset={meta['offset']} status={result['status']} "
            f"should_commit={result['should_commit']} error={result['error']}"
        )

    print("")
    print("[OFFSETS]")
    print(f"committed={committed_offsets}")
    print(f"rejected={rejected_offsets}")
    return 0


def dispatch_messages_maybe_fail(
    messages: Sequence[Mapping[str, str]],
    reseller_id: int,
    event_kind: str,
    *,
    client_id: Optional[int] = None,
    status_code: Optional[int] = None,
) -> None:
    for message in messages:
        if message.get("email_to") == "fail-email@example.com":
            raise RuntimeError("email provider unavailable")
    dispatch_messages_via_console(
        messages,
        reseller_id,
        event_kind,
        client_id=client_id,
        status_code=status_code,
    )


def make_request(**overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {
        "resellerId": 1,
        "notificationType": 2,
        "clientId": 10,
        "creatorId": 20,
        "expertId": 21,
        "complaintId": 5001,
        "complaintNumber": "RET-5001",
        "consumptionId": 7001,
        "consumptionNumber": "CN-7001",
        "agreementNumber": "AG-2026-14",
        "date": "2026-10-18",
        "differences": {"from": 0, "to": 1},
    }
    return base | overrides


def sample_records() -> list[dict[str, Any]]:
    requests = [
        make_request(),
        make_request(notificationType=1, differences=None),
        make_request(resellerId=0),
        make_request(clientId=99),
        make_request(differences={}),
        make_request(clientId=11, differences={"from": 1, "to": 2}),
    ]
    return [
        {
            "topic": "returns.notifications",
            "partition": 0,
            "offset": 100 + index,
            "value": request,
        }
        for index, request in enumerate(requests)
    ]


if __name__ == "__main__":
    sys.exit(main())
