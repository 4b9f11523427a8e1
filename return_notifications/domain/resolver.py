"""Input gate and entity resolution.

Mental model refresher:
- These are the checks that must pass before anything is rendered or sent.
- Lookups come in as injected callables returning the entity or None.
- Every failure here is a client-input problem (status 400) and aborts the
  whole operation.
"""

from __future__ import annotations

from ..errors import NotFoundError, ValidationError
from ..types import FindByIdFn
from .models import CONTRACTOR_TYPE_CUSTOMER, Contractor, Employee, Seller


def validate_request_ids(reseller_id: int, notification_type: int) -> None:
    """Reject a request that is missing its reseller or notification type."""
    if not reseller_id:
        raise ValidationError("Empty resellerId")
    if not notification_type:
        raise ValidationError("Empty notificationType")


def resolve_seller(find_seller_by_id: FindByIdFn, reseller_id: int) -> Seller:
    seller = find_seller_by_id(reseller_id)
    if seller is None:
        raise NotFoundError("Seller not found!")
    return seller


def resolve_client(
    find_contractor_by_id: FindByIdFn,
    client_id: int,
    reseller_id: int,
) -> Contractor:
    """Return the reseller's customer, treating any mismatch as not found.

    A contractor of another type, or one owned by a different reseller, is
    indistinguishable from a missing one for the caller.
    """
    client = find_contractor_by_id(client_id)
    if (
        client is None
        or client.type != CONTRACTOR_TYPE_CUSTOMER
        or client.seller_id != reseller_id
    ):
        raise NotFoundError("Client not found!")
    return client


def resolve_employee(
    find_employee_by_id: FindByIdFn,
    employee_id: int,
    not_found_message: str,
) -> Employee:
    employee = find_employee_by_id(employee_id)
    if employee is None:
        raise NotFoundError(not_found_message)
    return employee
