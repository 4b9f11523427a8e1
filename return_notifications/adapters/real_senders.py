"""Real provider adapters for production-like sending.

Mental model refresher:
- This module is an outbound adapter.
- It integrates with external providers using environment-variable config.
- Domain/application code only sees the `dispatch_messages` and
  `send_client_notification` callables.

Failure contract:
- Mailgun failures raise RuntimeError; the workflow turns that into a
  DispatchError and aborts.
- The Twilio client notifier never raises: it reports `(False, error)` so the
  SMS outcome lands in the result report.
"""

from __future__ import annotations

import base64
import os
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Mapping, Optional, Sequence

from ..types import ClientNotificationFn, FindByIdFn, TranslateFn


def dispatch_messages_via_mailgun_from_env(
    messages: Sequence[Mapping[str, str]],
    reseller_id: int,
    event_kind: str,
    *,
    client_id: Optional[int] = None,
    status_code: Optional[int] = None,
) -> None:
    """Send each message via Mailgun REST API using environment-variable config."""
    api_key = _required_env("MAILGUN_API_KEY")
    domain = _required_env("MAILGUN_DOMAIN")
    base_url = os.getenv("MAILGUN_API_BASE_URL", "https://api.mailgun.net").rstrip("/")
    timeout_seconds = float(os.getenv("MAILGUN_TIMEOUT_SECONDS", "10"))

    encoded_domain = urllib.parse.quote(domain, safe="")
    endpoint = f"{base_url}/v3/{encoded_domain}/messages"

    for message in messages:
        fields = {
            "from": message["email_from"],
            "to": message["email_to"],
            "subject": message.get("subject", ""),
            "text": message.get("message", ""),
            "o:tag": event_kind,
            "v:reseller_id": str(reseller_id),
        }
        if client_id is not None:
            fields["v:client_id"] = str(client_id)
        if status_code is not None:
            fields["v:status_code"] = str(status_code)

        _post_form(
            endpoint,
            fields,
            auth_header=_basic_auth_header("api", api_key),
            timeout_seconds=timeout_seconds,
            provider="Mailgun email send",
        )


def send_sms_via_twilio_from_env(*, to_phone_e164: str, message: str) -> None:
    """Send SMS via Twilio REST API using environment-variable config."""
    account_sid = _required_env("TWILIO_ACCOUNT_SID")
    auth_token = _required_env("TWILIO_AUTH_TOKEN")
    from_phone = _required_env("TWILIO_FROM_PHONE")
    base_url = os.getenv("TWILIO_API_BASE_URL", "https://api.twilio.com").rstrip("/")
    timeout_seconds = float(os.getenv("TWILIO_TIMEOUT_SECONDS", "10"))

    endpoint = f"{base_url}/2010-04-01/Accounts/{account_sid}/Messages.json"
    _post_form(
        endpoint,
        {"To": to_phone_e164, "From": from_phone, "Body": message},
        auth_header=_basic_auth_header(account_sid, auth_token),
        timeout_seconds=timeout_seconds,
        provider="Twilio SMS send",
    )


def make_twilio_client_notifier(
    find_contractor_by_id: FindByIdFn,
    translate: TranslateFn,
) -> ClientNotificationFn:
    """Build a `send_client_notification` collaborator backed by Twilio."""

    def send_client_notification(
        reseller_id: int,
        client_id: int,
        event_kind: str,
        status_code: int,
        template_data: Mapping[str, Any],
    ) -> tuple[bool, Optional[str]]:
        client = find_contractor_by_id(client_id)
        mobile = getattr(client, "mobile", None) if client is not None else None
        if not mobile:
            return False, f"Client {client_id} has no mobile number"

        body = translate("complaintClientSmsBody", template_data, reseller_id)
        try:
            send_sms_via_twilio_from_env(to_phone_e164=mobile, message=body)
        except RuntimeError as exc:
            return False, str(exc)
        return True, None

    return send_client_notification


def _post_form(
    endpoint: str,
    fields: Mapping[str, str],
    *,
    auth_header: str,
    timeout_seconds: float,
    provider: str,
) -> None:
    payload = urllib.parse.urlencode(fields).encode("utf-8")
    request = urllib.request.Request(endpoint, data=payload, method="POST")
    request.add_header("Authorization", auth_header)
    request.add_header("Content-Type", "application/x-www-form-urlencoded")

    try:
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = int(response.getcode())
            if status < 200 or status >= 300:
                raise RuntimeError(f"{provider} failed with status {status}")
            response.read()
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace")
        raise RuntimeError(f"{provider} failed HTTP {exc.code}: {details[:300]}") from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"{provider} failed: {exc.reason}") from exc


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value.strip()


def _basic_auth_header(username: str, password: str) -> str:
    token = f"{username}:{password}".encode("utf-8")
    encoded = base64.b64encode(token).decode("ascii")
    return f"Basic {encoded}"
