"""Static directory adapter for entity lookups, permits and sender addresses.

Mental model refresher:
- This is an outbound adapter standing in for the reference-data services
  (seller/contractor/employee storage, status names, permit lists).
- It is built from one plain mapping so local runs and the Kafka worker can
  share a JSON file. Production would swap each bound method for a real
  service client without touching domain code.

Expected shape (all sections optional):

    {
      "sellers": [{"id": 1, "name": "Acme"}],
      "contractors": [{"id": 10, "type": "customer", "seller_id": 1, ...}],
      "employees": [{"id": 20, "first_name": "Ann", "last_name": "Lee"}],
      "statuses": {"1": "Completed", "2": "Pending"},
      "reseller_emails": {"1": "returns@acme.example"},
      "permits": {"1": {"tsGoodsReturn": ["ops@acme.example"]}}
    }
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from ..application.collaborators import Collaborators
from ..domain.models import Contractor, Employee, Seller
from ..types import ClientNotificationFn, DispatchMessagesFn, TranslateFn


class StaticDirectory:
    def __init__(self, data: Mapping[str, Any]) -> None:
        self._sellers = {
            int(item["id"]): Seller(id=int(item["id"]), name=str(item.get("name", "")))
            for item in data.get("sellers", []) or []
        }
        self._contractors = {
            int(item["id"]): _contractor_from_mapping(item)
            for item in data.get("contractors", []) or []
        }
        self._employees = {
            int(item["id"]): Employee(
                id=int(item["id"]),
                first_name=str(item.get("first_name", "")),
                last_name=str(item.get("last_name", "")),
            )
            for item in data.get("employees", []) or []
        }
        self._statuses = {
            int(code): str(name) for code, name in (data.get("statuses") or {}).items()
        }
        self._reseller_emails = {
            int(reseller_id): str(email)
            for reseller_id, email in (data.get("reseller_emails") or {}).items()
        }
        self._permits = {
            int(reseller_id): {
                str(event_key): [str(email) for email in emails]
                for event_key, emails in events.items()
            }
            for reseller_id, events in (data.get("permits") or {}).items()
        }

    def find_seller_by_id(self, seller_id: int) -> Optional[Seller]:
        return self._sellers.get(seller_id)

    def find_contractor_by_id(self, contractor_id: int) -> Optional[Contractor]:
        return self._contractors.get(contractor_id)

    def find_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def status_name_for(self, code: int) -> str:
        return self._statuses.get(code, "")

    def reseller_from_address(self, reseller_id: int) -> str:
        return self._reseller_emails.get(reseller_id, "")

    def permitted_employee_emails(self, reseller_id: int, event_key: str) -> list[str]:
        return list(self._permits.get(reseller_id, {}).get(event_key, []))

    def collaborators(
        self,
        *,
        translate: TranslateFn,
        dispatch_messages: DispatchMessagesFn,
        send_client_notification: ClientNotificationFn,
    ) -> Collaborators:
        """Bundle the directory lookups with the given rendering and senders."""
        return Collaborators(
            find_seller_by_id=self.find_seller_by_id,
            find_contractor_by_id=self.find_contractor_by_id,
            find_employee_by_id=self.find_employee_by_id,
            status_name_for=self.status_name_for,
            translate=translate,
            reseller_from_address=self.reseller_from_address,
            permitted_employee_emails=self.permitted_employee_emails,
            dispatch_messages=dispatch_messages,
            send_client_notification=send_client_notification,
        )


def load_directory_from_file(path: Path | str) -> StaticDirectory:
    with Path(path).open("r", encoding="utf-8") as file_handle:
        data = json.load(file_handle)
    if not isinstance(data, dict):
        raise ValueError("Directory file must contain a JSON object")
    return StaticDirectory(data)


def load_directory_from_env() -> StaticDirectory:
    return load_directory_from_file(_required_env("RETURN_DIRECTORY_FILE"))


def _contractor_from_mapping(item: Mapping[str, Any]) -> Contractor:
    return Contractor(
        id=int(item["id"]),
        type=str(item.get("type", "")),
        seller_id=int(item.get("seller_id", 0)),
        name=str(item.get("name", "")),
        first_name=str(item.get("first_name", "")),
        last_name=str(item.get("last_name", "")),
        email=_as_optional_str(item.get("email")),
        mobile=_as_optional_str(item.get("mobile")),
    )


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value.strip()
