from __future__ import annotations

import unittest
from typing import Any, Mapping, Optional

from return_notifications.application.process import initial_result, merge_result
from return_notifications.domain import (
    TEMPLATE_FIELDS,
    Contractor,
    Employee,
    NotificationRequest,
    StatusChange,
    build_template_data,
    compute_differences,
    resolve_client,
    validate_request_ids,
    validate_template_data,
)
from return_notifications.errors import (
    IncompleteTemplateError,
    NotFoundError,
    ReturnNotificationError,
    ValidationError,
)


def fake_translate(key: str, params: Optional[Mapping[str, Any]], reseller_id: int) -> str:
    if params:
        rendered = ",".join(f"{name}={value}" for name, value in sorted(params.items()))
        return f"{key}[{rendered}]@{reseller_id}"
    return f"{key}@{reseller_id}"


def make_template(**overrides: Any) -> dict[str, Any]:
    request = NotificationRequest(
        reseller_id=1,
        notification_type=2,
        client_id=10,
        creator_id=20,
        expert_id=21,
        complaint_id=5001,
        complaint_number="RET-5001",
        consumption_id=7001,
        consumption_number="CN-7001",
        agreement_number="AG-14",
        date="2026-10-18",
    )
    template = build_template_data(
        request,
        creator=Employee(20, "Ann", "Lee"),
        expert=Employee(21, "Omar", "Haddad"),
        client=Contractor(10, "customer", 1, name="ACME-10", first_name="Dana"),
        differences="changed",
    )
    return template | overrides


class RequestIdTests(unittest.TestCase):
    def test_both_ids_present(self) -> None:
        validate_request_ids(1, 2)

    def test_reseller_checked_first(self) -> None:
        with self.assertRaises(ValidationError) as exc:
            validate_request_ids(0, 0)
        self.assertEqual(exc.exception.message, "Empty resellerId")


class ClientResolutionTests(unittest.TestCase):
    def test_returns_matching_customer(self) -> None:
        client = Contractor(10, "customer", 1)
        self.assertIs(resolve_client(lambda _id: client, 10, 1), client)

    def test_none_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            resolve_client(lambda _id: None, 10, 1)


class DifferencesTests(unittest.TestCase):
    def test_new_uses_fixed_message(self) -> None:
        text = compute_differences(
            1,
            StatusChange(1, 2),
            5,
            translate=fake_translate,
            status_name_for=lambda code: f"S{code}",
        )
        self.assertEqual(text, "NewPositionAdded@5")

    def test_change_interpolates_status_names(self) -> None:
        text = compute_differences(
            2,
            StatusChange(1, 2),
            5,
            translate=fake_translate,
            status_name_for=lambda code: f"S{code}",
        )
        self.assertEqual(text, "PositionStatusHasChanged[FROM=S1,TO=S2]@5")

    def test_change_without_status_change_is_empty(self) -> None:
        text = compute_differences(
            2, None, 5, translate=fake_translate, status_name_for=lambda code: ""
        )
        self.assertEqual(text, "")

    def test_unknown_type_is_empty(self) -> None:
        text = compute_differences(
            9, StatusChange(1, 2), 5, translate=fake_translate, status_name_for=str
        )
        self.assertEqual(text, "")


class TemplateTests(unittest.TestCase):
    def test_keys_are_fixed_and_ordered(self) -> None:
        template = make_template()
        self.assertEqual(tuple(template), TEMPLATE_FIELDS)
        self.assertEqual(len(TEMPLATE_FIELDS), 13)

    def test_full_name_preferred_over_raw_name(self) -> None:
        self.assertEqual(make_template()["CLIENT_NAME"], "Dana")

    def test_complete_template_passes(self) -> None:
        validate_template_data(make_template())

    def test_zero_id_is_empty(self) -> None:
        with self.assertRaises(IncompleteTemplateError) as exc:
            validate_template_data(make_template(CONSUMPTION_ID=0))
        self.assertEqual(exc.exception.message, "Template Data (CONSUMPTION_ID) is empty!")

    def test_first_empty_field_is_reported(self) -> None:
        with self.assertRaises(IncompleteTemplateError) as exc:
            validate_template_data(make_template(EXPERT_NAME="", DATE=""))
        self.assertIn("(EXPERT_NAME)", exc.exception.message)


class ErrorTaxonomyTests(unittest.TestCase):
    def test_status_codes(self) -> None:
        self.assertEqual(ValidationError("x").status_code, 400)
        self.assertEqual(NotFoundError("x").status_code, 400)
        self.assertEqual(IncompleteTemplateError("x").status_code, 500)
        self.assertTrue(issubclass(NotFoundError, ReturnNotificationError))
        self.assertEqual(str(NotFoundError("Seller not found!")), "Seller not found!")


class MergeResultTests(unittest.TestCase):
    def test_merge_does_not_touch_original(self) -> None:
        base = initial_result()
        merged = merge_result(base, {"notificationClientBySms": {"isSent": True}})

        self.assertEqual(merged["notificationClientBySms"], {"isSent": True, "message": ""})
        self.assertFalse(base["notificationClientBySms"]["isSent"])

    def test_empty_update_keeps_defaults(self) -> None:
        self.assertEqual(merge_result(initial_result(), {}), initial_result())


if __name__ == "__main__":
    unittest.main()
