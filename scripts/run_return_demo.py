#!/usr/bin/env python3
"""Run one goods-return notification locally with console senders."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from return_notifications import (  # noqa: E402
    ReturnNotificationError,
    perform_return_notification,
)
from return_notifications.adapters import (  # noqa: E402
    dispatch_messages_via_console,
    load_directory_from_file,
    make_translator,
    send_client_notification_via_console,
)


def main() -> int:
    args = parse_args()
    payload = load_payload(args.payload_file)
    directory = load_directory_from_file(args.directory_file)
    collaborators = directory.collaborators(
        translate=make_translator(),
        dispatch_messages=dispatch_messages_via_console,
        send_client_notification=send_client_notification_via_console,
    )

    try:
        result = perform_return_notification(payload, collaborators)
    except ReturnNotificationError as exc:
        print("")
        print("[FAILED]")
        print(f"error={type(exc).__name__} status_code={exc.status_code} message={exc.message}")
        return 1

    print("")
    print("[SUMMARY]")
    print(f"employee_email={result['notificationEmployeeByEmail']}")
    print(f"client_email={result['notificationClientByEmail']}")
    sms = result["notificationClientBySms"]
    print(f"client_sms={sms['isSent']} message={sms['message']!r}")
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Execute the goods-return notification workflow with a sample request."
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file with the request mapping (camelCase keys).",
    )
    parser.add_argument(
        "--directory-file",
        type=Path,
        default=REPO_ROOT / "scripts" / "sample_directory.json",
        help="JSON directory with sellers, contractors, employees and permits.",
    )
    return parser.parse_args()


def load_payload(payload_file: Path | None) -> dict[str, Any]:
    if payload_file is None:
        return sample_payload()
    with payload_file.open("r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


def sample_payload() -> dict[str, Any]:
    return {
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


if __name__ == "__main__":
    sys.exit(main())
