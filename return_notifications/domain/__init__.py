"""Domain layer: validation, resolution, template and channel rules."""

from .client import notify_client
from .differences import compute_differences
from .employees import notify_employees
from .models import (
    CONTRACTOR_TYPE_CUSTOMER,
    EMPLOYEE_PERMIT_GOODS_RETURN,
    EVENT_CHANGE_RETURN_STATUS,
    Contractor,
    Employee,
    NotificationRequest,
    NotificationType,
    Seller,
    StatusChange,
)
from .resolver import resolve_client, resolve_employee, resolve_seller, validate_request_ids
from .template import TEMPLATE_FIELDS, build_template_data, validate_template_data

__all__ = [
    "CONTRACTOR_TYPE_CUSTOMER",
    "EMPLOYEE_PERMIT_GOODS_RETURN",
    "EVENT_CHANGE_RETURN_STATUS",
    "TEMPLATE_FIELDS",
    "Contractor",
    "Employee",
    "NotificationRequest",
    "NotificationType",
    "Seller",
    "StatusChange",
    "build_template_data",
    "compute_differences",
    "notify_client",
    "notify_employees",
    "resolve_client",
    "resolve_employee",
    "resolve_seller",
    "validate_request_ids",
    "validate_template_data",
]
