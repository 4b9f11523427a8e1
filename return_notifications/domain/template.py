"""Template payload assembly and completeness check."""

from __future__ import annotations

from ..errors import IncompleteTemplateError
from ..types import TemplateData
from .models import Contractor, Employee, NotificationRequest

TEMPLATE_FIELDS = (
    "COMPLAINT_ID",
    "COMPLAINT_NUMBER",
    "CREATOR_ID",
    "CREATOR_NAME",
    "EXPERT_ID",
    "EXPERT_NAME",
    "CLIENT_ID",
    "CLIENT_NAME",
    "CONSUMPTION_ID",
    "CONSUMPTION_NUMBER",
    "AGREEMENT_NUMBER",
    "DATE",
    "DIFFERENCES",
)


def build_template_data(
    request: NotificationRequest,
    *,
    creator: Employee,
    expert: Employee,
    client: Contractor,
    differences: str,
) -> TemplateData:
    """Assemble the fixed-key payload handed to the rendering collaborator."""
    return {
        "COMPLAINT_ID": int(request.complaint_id),
        "COMPLAINT_NUMBER": str(request.complaint_number),
        "CREATOR_ID": int(request.creator_id),
        "CREATOR_NAME": creator.full_name,
        "EXPERT_ID": int(request.expert_id),
        "EXPERT_NAME": expert.full_name,
        "CLIENT_ID": int(request.client_id),
        "CLIENT_NAME": client.full_name or client.name,
        "CONSUMPTION_ID": int(request.consumption_id),
        "CONSUMPTION_NUMBER": str(request.consumption_number),
        "AGREEMENT_NUMBER": str(request.agreement_number),
        "DATE": str(request.date),
        "DIFFERENCES": differences,
    }


def validate_template_data(template_data: TemplateData) -> None:
    """Fail on the first missing or empty field, in template order."""
    for field in TEMPLATE_FIELDS:
        value = template_data.get(field)
        if value is None or value == 0 or value == "":
            raise IncompleteTemplateError(f"Template Data ({field}) is empty!")
