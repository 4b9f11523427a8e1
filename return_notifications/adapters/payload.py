"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates transport-shaped data (a camelCase request mapping, optionally
  wrapped in a "data" envelope) into the internal NotificationRequest.
- Coercion is lenient: missing or non-numeric ids become 0 and missing text
  becomes "". Deciding whether those values are acceptable is left to the
  workflow.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..domain.models import NotificationRequest, StatusChange
from ..types import Payload


def parse_notification_request(payload: Payload) -> NotificationRequest:
    """Normalize a request mapping into a NotificationRequest.

    This is the first handoff from transport data to internal data.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("request payload must be a mapping")

    data = payload.get("data")
    if isinstance(data, Mapping):
        payload = data

    return NotificationRequest(
        reseller_id=_as_int(payload.get("resellerId")),
        notification_type=_as_int(payload.get("notificationType")),
        client_id=_as_int(payload.get("clientId")),
        creator_id=_as_int(payload.get("creatorId")),
        expert_id=_as_int(payload.get("expertId")),
        complaint_id=_as_int(payload.get("complaintId")),
        complaint_number=_as_str(payload.get("complaintNumber")),
        consumption_id=_as_int(payload.get("consumptionId")),
        consumption_number=_as_str(payload.get("consumptionNumber")),
        agreement_number=_as_str(payload.get("agreementNumber")),
        date=_as_str(payload.get("date")),
        differences=_as_status_change(payload.get("differences")),
    )


def _as_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return int(value or 0)
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_status_change(value: Any) -> Optional[StatusChange]:
    if not isinstance(value, Mapping) or not value:
        return None
    return StatusChange(
        from_status=_as_int(value.get("from")),
        to_status=_as_int(value.get("to")),
    )
