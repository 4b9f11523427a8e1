"""Bundle of external services the workflow calls into."""

from __future__ import annotations

from dataclasses import dataclass

from ..types import (
    ClientNotificationFn,
    DispatchMessagesFn,
    FindByIdFn,
    FromAddressFn,
    PermittedEmailsFn,
    StatusNameFn,
    TranslateFn,
)


@dataclass(frozen=True)
class Collaborators:
    find_seller_by_id: FindByIdFn
    find_contractor_by_id: FindByIdFn
    find_employee_by_id: FindByIdFn
    status_name_for: StatusNameFn
    translate: TranslateFn
    reseller_from_address: FromAddressFn
    permitted_employee_emails: PermittedEmailsFn
    dispatch_messages: DispatchMessagesFn
    send_client_notification: ClientNotificationFn
