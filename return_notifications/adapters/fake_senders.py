"""Fake sender adapters for local smoke tests.

Mental model refresher:
- This is outbound adapter code.
- In production, this is where provider SDK/API calls live (Mailgun, Twilio).
- Domain code calls these through injected functions; domain does not know which
  provider implementation is underneath.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence


def dispatch_messages_via_console(
    messages: Sequence[Mapping[str, str]],
    reseller_id: int,
    event_kind: str,
    *,
    client_id: Optional[int] = None,
    status_code: Optional[int] = None,
) -> None:
    for message in messages:
        print("[EMAIL]")
        print(f"reseller_id={reseller_id} event={event_kind}")
        if client_id is not None:
            print(f"client_id={client_id} status_code={status_code}")
        print(f"from={message.get('email_from', '')}")
        print(f"to={message.get('email_to', '')}")
        print(f"subject={message.get('subject', '')}")
        print(f"body={message.get('message', '')}")


def send_client_notification_via_console(
    reseller_id: int,
    client_id: int,
    event_kind: str,
    status_code: int,
    template_data: Mapping[str, Any],
) -> tuple[bool, Optional[str]]:
    print("[SMS]")
    print(f"reseller_id={reseller_id} client_id={client_id} event={event_kind}")
    print(f"status_code={status_code}")
    print(f"differences={template_data.get('DIFFERENCES', '')}")
    return True, None
