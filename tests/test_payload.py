from __future__ import annotations

import unittest

from return_notifications.adapters.payload import parse_notification_request
from return_notifications.domain.models import StatusChange


class ParseNotificationRequestTests(unittest.TestCase):
    def test_maps_camel_case_payload(self) -> None:
        request = parse_notification_request(
            {
                "resellerId": "3",
                "notificationType": 2,
                "clientId": 10,
                "creatorId": "20",
                "expertId": 21.0,
                "complaintId": 5001,
                "complaintNumber": 77,
                "consumptionId": "7001",
                "consumptionNumber": "CN-7001",
                "agreementNumber": "AG-14",
                "date": "2026-10-18",
                "differences": {"from": "1", "to": 2},
            }
        )

        self.assertEqual(request.reseller_id, 3)
        self.assertEqual(request.creator_id, 20)
        self.assertEqual(request.expert_id, 21)
        self.assertEqual(request.consumption_id, 7001)
        self.assertEqual(request.complaint_number, "77")
        self.assertEqual(request.differences, StatusChange(from_status=1, to_status=2))

    def test_missing_and_malformed_values_fall_back(self) -> None:
        request = parse_notification_request(
            {"resellerId": "abc", "clientId": None, "complaintNumber": None}
        )

        self.assertEqual(request.reseller_id, 0)
        self.assertEqual(request.notification_type, 0)
        self.assertEqual(request.client_id, 0)
        self.assertEqual(request.complaint_number, "")
        self.assertEqual(request.date, "")
        self.assertIsNone(request.differences)

    def test_numeric_string_with_fraction_is_truncated(self) -> None:
        request = parse_notification_request({"resellerId": "4.9"})
        self.assertEqual(request.reseller_id, 4)

    def test_empty_or_non_mapping_differences_are_absent(self) -> None:
        for differences in ({}, [], "", None, [1, 2]):
            with self.subTest(differences=differences):
                request = parse_notification_request({"differences": differences})
                self.assertIsNone(request.differences)

    def test_partial_differences_default_to_zero(self) -> None:
        request = parse_notification_request({"differences": {"from": 4}})
        self.assertEqual(request.differences, StatusChange(from_status=4, to_status=0))

    def test_unwraps_data_envelope(self) -> None:
        request = parse_notification_request({"data": {"resellerId": 9, "notificationType": 1}})
        self.assertEqual(request.reseller_id, 9)
        self.assertEqual(request.notification_type, 1)

    def test_rejects_non_mapping(self) -> None:
        with self.assertRaises(ValueError):
            parse_notification_request(["not", "a", "mapping"])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
