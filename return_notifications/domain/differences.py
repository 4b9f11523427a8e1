"""Change-description rules for the DIFFERENCES template field."""

from __future__ import annotations

from typing import Optional

from ..types import StatusNameFn, TranslateFn
from .models import NotificationType, StatusChange


def compute_differences(
    notification_type: int,
    differences: Optional[StatusChange],
    reseller_id: int,
    *,
    translate: TranslateFn,
    status_name_for: StatusNameFn,
) -> str:
    """Describe what changed, or return "" when there is nothing to describe.

    NEW ignores any supplied status change. CHANGE needs a status change to
    describe; without one (or for an unknown type) the result is empty.
    """
    if notification_type == NotificationType.NEW:
        return translate("NewPositionAdded", None, reseller_id)

    if notification_type == NotificationType.CHANGE and differences is not None:
        return translate(
            "PositionStatusHasChanged",
            {
                "FROM": status_name_for(differences.from_status),
                "TO": status_name_for(differences.to_status),
            },
            reseller_id,
        )

    return ""
