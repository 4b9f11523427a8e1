"""Value objects shared by the domain steps.

Entities are read-only snapshots handed out by the lookup collaborators;
the workflow never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

CONTRACTOR_TYPE_CUSTOMER = "customer"

EVENT_CHANGE_RETURN_STATUS = "change_return_status"
EMPLOYEE_PERMIT_GOODS_RETURN = "tsGoodsReturn"


class NotificationType(IntEnum):
    NEW = 1
    CHANGE = 2


@dataclass(frozen=True)
class Seller:
    id: int
    name: str = ""


@dataclass(frozen=True)
class Contractor:
    id: int
    type: str
    seller_id: int
    name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    mobile: Optional[str] = None

    @property
    def full_name(self) -> str:
        return _join_name(self.first_name, self.last_name)


@dataclass(frozen=True)
class Employee:
    id: int
    first_name: str = ""
    last_name: str = ""

    @property
    def full_name(self) -> str:
        return _join_name(self.first_name, self.last_name)


@dataclass(frozen=True)
class StatusChange:
    from_status: int
    to_status: int


@dataclass(frozen=True)
class NotificationRequest:
    reseller_id: int
    notification_type: int
    client_id: int = 0
    creator_id: int = 0
    expert_id: int = 0
    complaint_id: int = 0
    complaint_number: str = ""
    consumption_id: int = 0
    consumption_number: str = ""
    agreement_number: str = ""
    date: str = ""
    differences: Optional[StatusChange] = None


def _join_name(*parts: str) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())
