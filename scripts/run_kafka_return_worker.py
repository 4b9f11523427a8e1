#!/usr/bin/env python3
"""Run the Kafka goods-return notification worker.

This worker consumes the returns topic, resolves reference data from the JSON
directory named by RETURN_DIRECTORY_FILE, sends email via Mailgun and SMS via
Twilio. Use --console to print messages instead of calling the providers.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from return_notifications.adapters import (  # noqa: E402
    dispatch_messages_via_console,
    dispatch_messages_via_mailgun_from_env,
    load_directory_from_env,
    make_translator,
    make_twilio_client_notifier,
    send_client_notification_via_console,
)
from return_notifications.adapters.kafka_runtime import run_return_worker_forever  # noqa: E402


def main() -> int:
    args = parse_args()
    _load_env_file(REPO_ROOT / ".env")

    directory = load_directory_from_env()
    translate = make_translator()
    if args.console:
        collaborators = directory.collaborators(
            translate=translate,
            dispatch_messages=dispatch_messages_via_console,
            send_client_notification=send_client_notification_via_console,
        )
    else:
        collaborators = directory.collaborators(
            translate=translate,
            dispatch_messages=dispatch_messages_via_mailgun_from_env,
            send_client_notification=make_twilio_client_notifier(
                directory.find_contractor_by_id, translate
            ),
        )
    return run_return_worker_forever(collaborators)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run Kafka consumer loop for goods-return notifications."
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print emails and SMS to stdout instead of calling Mailgun/Twilio.",
    )
    return parser.parse_args()


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)


if __name__ == "__main__":
    sys.exit(main())
