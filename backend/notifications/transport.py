"""
Mail transports for publication notifications.

A transport exposes one capability, ``send(message) -> outcome``. The outcome
is a dict with 'success' (bool), 'email_id' (str if sent) and 'error' (str if
failed). Transports never raise for delivery failures.

The transport is picked once by get_mail_transport() and passed into the
dispatch functions; nothing reads a module-level client.
"""

import os
from pathlib import Path
from typing import Any, Protocol

import resend
from dotenv import load_dotenv

from models import OutboundEmail

load_dotenv()


class MailTransport(Protocol):
    def send(self, message: OutboundEmail) -> dict[str, Any]: ...


class NullTransport:
    """Used when no mail provider is configured. Only logs the intent."""

    def send(self, message: OutboundEmail) -> dict[str, Any]:
        print(f"  (mail transport not configured - email to {message.to} logged only)")
        return {"success": True, "email_id": None}


class ResendTransport:
    """Delivers notifications through the Resend API."""

    def __init__(self, api_key: str):
        if not api_key:
            raise ValueError("Resend API key must not be empty")
        self.api_key = api_key

    def _build_params(self, message: OutboundEmail) -> dict[str, Any]:
        params: dict[str, Any] = {
            "from": message.from_address,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }
        if message.text:
            params["text"] = message.text
        if message.cc:
            params["cc"] = message.cc
        if message.headers:
            params["headers"] = message.headers
        if message.attachment:
            content = Path(message.attachment.path).read_bytes()
            params["attachments"] = [
                {"filename": message.attachment.filename, "content": list(content)}
            ]
        return params

    def send(self, message: OutboundEmail) -> dict[str, Any]:
        try:
            resend.api_key = self.api_key
            response = resend.Emails.send(self._build_params(message))
            return {"success": True, "email_id": response.get("id")}
        except Exception as e:
            return {"success": False, "error": str(e)}


def get_mail_transport() -> MailTransport:
    """Pick the transport from configuration (RESEND_API_KEY)."""
    api_key = os.getenv("RESEND_API_KEY")
    if api_key:
        return ResendTransport(api_key)
    print("Mail transport not configured. Emails will be logged to console only.")
    return NullTransport()
