"""Client email and SMS rules.

Mental model refresher:
- Domain modules hold channel/business rules.
- The client is only told about status changes that name a target status.
- Email failures propagate (DispatchError). SMS failures are captured into the
  result so the caller still gets a report.
"""

from __future__ import annotations

from typing import Optional

from ..types import (
    ClientNotificationFn,
    DispatchMessagesFn,
    FromAddressFn,
    ResultUpdate,
    TemplateData,
    TranslateFn,
)
from .dispatch import dispatch_or_raise
from .models import EVENT_CHANGE_RETURN_STATUS, Contractor, NotificationType, StatusChange


def notify_client(
    notification_type: int,
    differences: Optional[StatusChange],
    reseller_id: int,
    client: Contractor,
    template_data: TemplateData,
    *,
    reseller_from_address: FromAddressFn,
    translate: TranslateFn,
    dispatch_messages: DispatchMessagesFn,
    send_client_notification: ClientNotificationFn,
) -> ResultUpdate:
    """Run both client channels and return the partial result update."""
    if notification_type != NotificationType.CHANGE or differences is None:
        return {}
    status_code = differences.to_status
    if not status_code:
        return {}

    update: ResultUpdate = {}

    email_from = reseller_from_address(reseller_id)
    if email_from and client.email:
        message = {
            "email_from": email_from,
            "email_to": client.email,
            "subject": translate("complaintClientEmailSubject", template_data, reseller_id),
            "message": translate("complaintClientEmailBody", template_data, reseller_id),
        }
        dispatch_or_raise(
            dispatch_messages,
            [message],
            reseller_id,
            EVENT_CHANGE_RETURN_STATUS,
            client_id=client.id,
            status_code=status_code,
        )
        update["notificationClientByEmail"] = True

    if client.mobile:
        update["notificationClientBySms"] = _send_sms(
            send_client_notification,
            reseller_id,
            client.id,
            status_code,
            template_data,
        )

    return update


def _send_sms(
    send_client_notification: ClientNotificationFn,
    reseller_id: int,
    client_id: int,
    status_code: int,
    template_data: TemplateData,
) -> dict[str, object]:
    outcome: dict[str, object] = {"isSent": False, "message": ""}
    try:
        sent, error = send_client_notification(
            reseller_id,
            client_id,
            EVENT_CHANGE_RETURN_STATUS,
            status_code,
            template_data,
        )
    except Exception as exc:
        outcome["message"] = str(exc)
        return outcome

    outcome["isSent"] = bool(sent)
    # Message only changes when the manager reports an error, even on success.
    if error:
        outcome["message"] = str(error)
    return outcome
