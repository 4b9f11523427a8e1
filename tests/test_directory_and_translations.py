from __future__ import annotations

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from return_notifications.adapters.directory import (
    StaticDirectory,
    load_directory_from_env,
    load_directory_from_file,
)
from return_notifications.adapters.fake_senders import (
    dispatch_messages_via_console,
    send_client_notification_via_console,
)
from return_notifications.adapters.translations import make_translator
from return_notifications.domain.models import Contractor, Employee, Seller

DIRECTORY = {
    "sellers": [{"id": 1, "name": "Acme"}],
    "contractors": [
        {
            "id": 10,
            "type": "customer",
            "seller_id": 1,
            "name": "ACME-10",
            "first_name": "Dana",
            "last_name": "Price",
            "email": " dana@example.com ",
            "mobile": "",
        }
    ],
    "employees": [{"id": 20, "first_name": "Ann", "last_name": "Lee"}],
    "statuses": {"1": "Pending"},
    "reseller_emails": {"1": "returns@acme.example"},
    "permits": {"1": {"tsGoodsReturn": ["ops@acme.example"]}},
}


class StaticDirectoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.directory = StaticDirectory(DIRECTORY)

    def test_entity_lookups(self) -> None:
        self.assertEqual(self.directory.find_seller_by_id(1), Seller(1, "Acme"))
        self.assertIsNone(self.directory.find_seller_by_id(2))
        self.assertEqual(self.directory.find_employee_by_id(20), Employee(20, "Ann", "Lee"))

        client = self.directory.find_contractor_by_id(10)
        self.assertIsInstance(client, Contractor)
        assert client is not None
        self.assertEqual(client.full_name, "Dana Price")
        self.assertEqual(client.email, "dana@example.com")
        self.assertIsNone(client.mobile)

    def test_reference_data(self) -> None:
        self.assertEqual(self.directory.status_name_for(1), "Pending")
        self.assertEqual(self.directory.status_name_for(9), "")
        self.assertEqual(self.directory.reseller_from_address(1), "returns@acme.example")
        self.assertEqual(self.directory.reseller_from_address(2), "")
        self.assertEqual(
            self.directory.permitted_employee_emails(1, "tsGoodsReturn"), ["ops@acme.example"]
        )
        self.assertEqual(self.directory.permitted_employee_emails(1, "other"), [])

    def test_empty_directory(self) -> None:
        directory = StaticDirectory({})
        self.assertIsNone(directory.find_contractor_by_id(10))
        self.assertEqual(directory.permitted_employee_emails(1, "tsGoodsReturn"), [])

    def test_load_from_file_and_env(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "directory.json"
            path.write_text(json.dumps(DIRECTORY), encoding="utf-8")

            from_file = load_directory_from_file(path)
            with mock.patch.dict(os.environ, {"RETURN_DIRECTORY_FILE": str(path)}, clear=True):
                from_env = load_directory_from_env()

        self.assertIsNotNone(from_file.find_seller_by_id(1))
        self.assertIsNotNone(from_env.find_employee_by_id(20))

    def test_load_from_file_rejects_non_object(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "directory.json"
            path.write_text("[]", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_directory_from_file(path)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_load_from_env_requires_path(self) -> None:
        with self.assertRaises(RuntimeError):
            load_directory_from_env()


class TranslatorTests(unittest.TestCase):
    def test_renders_placeholders(self) -> None:
        translate = make_translator()
        text = translate("PositionStatusHasChanged", {"FROM": "Pending", "TO": "Completed"}, 1)
        self.assertEqual(text, "Position status has changed from Pending to Completed")

    def test_missing_params_render_blank(self) -> None:
        translate = make_translator({"greeting": "Hello {NAME}!"})
        self.assertEqual(translate("greeting", None, 1), "Hello !")

    def test_unknown_key_renders_key(self) -> None:
        self.assertEqual(make_translator()("noSuchKey", {}, 1), "noSuchKey")

    def test_reseller_override(self) -> None:
        translate = make_translator(
            reseller_overrides={2: {"NewPositionAdded": "Nouvelle position ajoutee"}}
        )
        self.assertEqual(translate("NewPositionAdded", None, 1), "New position added")
        self.assertEqual(translate("NewPositionAdded", None, 2), "Nouvelle position ajoutee")

    def test_positional_field_renders_raw_template(self) -> None:
        translate = make_translator(
            reseller_overrides={1: {"complaintEmployeeEmailSubject": "Return {0}"}}
        )
        text = translate("complaintEmployeeEmailSubject", {"COMPLAINT_NUMBER": "RET-1"}, 1)
        self.assertEqual(text, "Return {0}")

    def test_unbalanced_brace_renders_raw_template(self) -> None:
        translate = make_translator({"broken": "Return {", "closing": "Return }"})
        self.assertEqual(translate("broken", {"X": 1}, 1), "Return {")
        self.assertEqual(translate("closing", None, 1), "Return }")


class ConsoleSenderTests(unittest.TestCase):
    def test_console_dispatch_prints_each_message(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            dispatch_messages_via_console(
                [{"email_from": "a@x", "email_to": "b@x", "subject": "s", "message": "m"}],
                1,
                "change_return_status",
                client_id=10,
                status_code=2,
            )

        text = output.getvalue()
        self.assertIn("[EMAIL]", text)
        self.assertIn("to=b@x", text)
        self.assertIn("client_id=10 status_code=2", text)

    def test_console_sms_reports_sent(self) -> None:
        with redirect_stdout(io.StringIO()):
            sent, error = send_client_notification_via_console(
                1, 10, "change_return_status", 2, {"DIFFERENCES": "done"}
            )
        self.assertTrue(sent)
        self.assertIsNone(error)


if __name__ == "__main__":
    unittest.main()
