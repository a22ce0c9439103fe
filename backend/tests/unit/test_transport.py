"""
Unit tests for notifications/transport.py

Tests the Resend and no-op transports and explicit transport selection.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from models import EmailAttachment, OutboundEmail
from notifications.transport import (
    NullTransport,
    ResendTransport,
    get_mail_transport,
)


def _make_message(**overrides) -> OutboundEmail:
    fields = {
        "from_address": "Publication Notifications <publications@test.example.com>",
        "to": "pat@acme.example.com",
        "subject": "PSI Service Bulletin SB-1 – Title",
        "html": "<p>Body</p>",
        "text": "Body",
    }
    fields.update(overrides)
    return OutboundEmail(**fields)


class TestResendTransport(unittest.TestCase):
    """Tests for ResendTransport"""

    @patch("notifications.transport.resend")
    def test_send_success(self, mock_resend):
        mock_resend.Emails.send.return_value = {"id": "email-abc"}
        transport = ResendTransport("re_test_key")

        result = transport.send(_make_message())

        self.assertEqual(result, {"success": True, "email_id": "email-abc"})
        self.assertEqual(mock_resend.api_key, "re_test_key")
        params = mock_resend.Emails.send.call_args[0][0]
        self.assertEqual(params["to"], ["pat@acme.example.com"])
        self.assertEqual(params["subject"], "PSI Service Bulletin SB-1 – Title")
        self.assertNotIn("cc", params)
        self.assertNotIn("attachments", params)

    @patch("notifications.transport.resend")
    def test_cc_and_headers_passed_through(self, mock_resend):
        mock_resend.Emails.send.return_value = {"id": "email-abc"}
        transport = ResendTransport("re_test_key")
        message = _make_message(
            cc="ops@acme.example.com; boss@acme.example.com",
            headers={"List-Unsubscribe": "<https://x/unsubscribe?token=t>"},
        )

        transport.send(message)

        params = mock_resend.Emails.send.call_args[0][0]
        self.assertEqual(params["cc"], "ops@acme.example.com; boss@acme.example.com")
        self.assertEqual(
            params["headers"]["List-Unsubscribe"], "<https://x/unsubscribe?token=t>"
        )

    @patch("notifications.transport.resend")
    def test_attachment_content_included(self, mock_resend):
        mock_resend.Emails.send.return_value = {"id": "email-abc"}
        transport = ResendTransport("re_test_key")

        with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as handle:
            handle.write(b"%PDF")
        self.addCleanup(os.remove, handle.name)

        message = _make_message(
            attachment=EmailAttachment(filename="bulletin.pdf", path=handle.name)
        )
        transport.send(message)

        params = mock_resend.Emails.send.call_args[0][0]
        self.assertEqual(
            params["attachments"], [{"filename": "bulletin.pdf", "content": list(b"%PDF")}]
        )

    @patch("notifications.transport.resend")
    def test_send_failure_returns_outcome(self, mock_resend):
        mock_resend.Emails.send.side_effect = Exception("API rate limit")
        transport = ResendTransport("re_test_key")

        result = transport.send(_make_message())

        self.assertFalse(result["success"])
        self.assertEqual(result["error"], "API rate limit")

    def test_empty_api_key_rejected(self):
        with self.assertRaises(ValueError):
            ResendTransport("")


class TestNullTransport(unittest.TestCase):
    """Tests for NullTransport"""

    @patch("builtins.print")
    def test_logs_only(self, mock_print):
        result = NullTransport().send(_make_message())

        self.assertTrue(result["success"])
        self.assertIn("pat@acme.example.com", mock_print.call_args[0][0])


class TestGetMailTransport(unittest.TestCase):
    """Tests for get_mail_transport()"""

    @patch.dict(os.environ, {"RESEND_API_KEY": "re_test_key"})
    def test_configured_returns_resend(self):
        self.assertIsInstance(get_mail_transport(), ResendTransport)

    @patch("builtins.print")
    def test_unconfigured_returns_null(self, mock_print):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("RESEND_API_KEY", None)
            self.assertIsInstance(get_mail_transport(), NullTransport)


if __name__ == "__main__":
    unittest.main()
