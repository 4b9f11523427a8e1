"""Employee email broadcast rules.

Mental model refresher:
- Domain modules hold channel/business rules.
- They decide what should happen for this channel:
  - does the reseller have a sender address?
  - which employees are permitted to receive goods-return mail?
  - what message content should be sent?
- They return a partial result update; the application layer merges it.
"""

from __future__ import annotations

from ..types import (
    DispatchMessagesFn,
    FromAddressFn,
    PermittedEmailsFn,
    ResultUpdate,
    TemplateData,
    TranslateFn,
)
from .dispatch import dispatch_or_raise
from .models import EMPLOYEE_PERMIT_GOODS_RETURN, EVENT_CHANGE_RETURN_STATUS


def notify_employees(
    reseller_id: int,
    template_data: TemplateData,
    *,
    reseller_from_address: FromAddressFn,
    permitted_employee_emails: PermittedEmailsFn,
    translate: TranslateFn,
    dispatch_messages: DispatchMessagesFn,
) -> ResultUpdate:
    """Send one email per permitted employee.

    The returned flag means the sends were attempted, not delivered. A gateway
    failure stops the loop and propagates as DispatchError.
    """
    email_from = reseller_from_address(reseller_id)
    recipients = list(permitted_employee_emails(reseller_id, EMPLOYEE_PERMIT_GOODS_RETURN))

    if not email_from or not recipients:
        return {}

    subject = translate("complaintEmployeeEmailSubject", template_data, reseller_id)
    body = translate("complaintEmployeeEmailBody", template_data, reseller_id)

    for email_to in recipients:
        message = {
            "email_from": email_from,
            "email_to": email_to,
            "subject": subject,
            "message": body,
        }
        dispatch_or_raise(dispatch_messages, [message], reseller_id, EVENT_CHANGE_RETURN_STATUS)

    return {"notificationEmployeeByEmail": True}
