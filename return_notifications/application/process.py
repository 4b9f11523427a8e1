"""Application orchestration for the goods-return notification use-case.

Mental model refresher:
- Application layer coordinates use-case flow across domain modules.
- In this project it:
  1) validates ids and resolves reseller, client, creator and expert
  2) computes the change description and builds the template payload
  3) runs the employee channel, then the client channels
  4) merges each channel's partial update into one result report
- Anything that fails before (or during) email dispatch raises; only the
  client SMS outcome is captured into the report.
"""

from __future__ import annotations

import copy
from typing import Union

from ..adapters.payload import parse_notification_request
from ..domain.client import notify_client
from ..domain.differences import compute_differences
from ..domain.employees import notify_employees
from ..domain.models import NotificationRequest
from ..domain.resolver import (
    resolve_client,
    resolve_employee,
    resolve_seller,
    validate_request_ids,
)
from ..domain.template import build_template_data, validate_template_data
from ..types import NotificationResult, Payload, ResultUpdate
from .collaborators import Collaborators


def initial_result() -> NotificationResult:
    return {
        "notificationEmployeeByEmail": False,
        "notificationClientByEmail": False,
        "notificationClientBySms": {
            "isSent": False,
            "message": "",
        },
    }


def perform_return_notification(
    request: Union[NotificationRequest, Payload],
    collaborators: Collaborators,
) -> NotificationResult:
    """Execute the goods-return notification use-case for one request."""
    if not isinstance(request, NotificationRequest):
        request = parse_notification_request(request)

    result = initial_result()

    validate_request_ids(request.reseller_id, request.notification_type)

    resolve_seller(collaborators.find_seller_by_id, request.reseller_id)
    client = resolve_client(
        collaborators.find_contractor_by_id, request.client_id, request.reseller_id
    )
    creator = resolve_employee(
        collaborators.find_employee_by_id, request.creator_id, "Creator not found!"
    )
    expert = resolve_employee(
        collaborators.find_employee_by_id, request.expert_id, "Expert not found!"
    )

    differences = compute_differences(
        request.notification_type,
        request.differences,
        request.reseller_id,
        translate=collaborators.translate,
        status_name_for=collaborators.status_name_for,
    )

    template_data = build_template_data(
        request,
        creator=creator,
        expert=expert,
        client=client,
        differences=differences,
    )
    validate_template_data(template_data)

    employee_update = notify_employees(
        request.reseller_id,
        template_data,
        reseller_from_address=collaborators.reseller_from_address,
        permitted_employee_emails=collaborators.permitted_employee_emails,
        translate=collaborators.translate,
        dispatch_messages=collaborators.dispatch_messages,
    )
    result = merge_result(result, employee_update)

    client_update = notify_client(
        request.notification_type,
        request.differences,
        request.reseller_id,
        client,
        template_data,
        reseller_from_address=collaborators.reseller_from_address,
        translate=collaborators.translate,
        dispatch_messages=collaborators.dispatch_messages,
        send_client_notification=collaborators.send_client_notification,
    )
    return merge_result(result, client_update)


def merge_result(result: NotificationResult, update: ResultUpdate) -> NotificationResult:
    """Return a new result with the channel update applied.

    Nested mappings (the SMS outcome) are merged key by key.
    """
    merged = copy.deepcopy(result)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            current.update(value)
        else:
            merged[key] = value
    return merged
