"""
Notification email composition and dispatch.

Builds one email per matched recipient from the publication's fields and hands
it to the injected mail transport. Dispatch is fire-and-forget: failures are
reported and logged, never raised to the distribution loop.
"""

import os
from datetime import datetime
from html import escape
from pathlib import Path
from typing import Any
from urllib.parse import quote

from models import Customer, EmailAttachment, OutboundEmail, Publication
from distribution.tag_sets import parse_tag_set
from notifications.error_logger import log_notification_error
from notifications.transport import MailTransport
from notifications.unsubscribe_tokens import (
    generate_unsubscribe_token,
    unsubscribe_tokens_configured,
)

SUBJECT_TITLE_LIMIT = 50


def _get_base_url() -> str:
    return os.getenv("FRONTEND_BASE_URL", "http://localhost:3000").rstrip("/")


def _get_from_address() -> str:
    from_email = os.getenv("NOTIFICATION_FROM_EMAIL", "publications@example.com")
    from_name = os.getenv("NOTIFICATION_FROM_NAME", "Publication Notifications")
    return f"{from_name} <{from_email}>"


def _build_unsubscribe_url(email: str) -> str:
    """
    Build the one-click unsubscribe URL for a recipient address.

    Without UNSUBSCRIBE_SECRET_KEY the link falls back to an unsigned
    ?email= link so unconfigured and dry-run setups can still dispatch.
    """
    if not unsubscribe_tokens_configured():
        print("  ⚠️  UNSUBSCRIBE_SECRET_KEY not set. Using unsigned unsubscribe link.")
        return f"{_get_base_url()}/unsubscribe?email={quote(email)}"
    token = generate_unsubscribe_token(email)
    return f"{_get_base_url()}/unsubscribe?token={token}"


def _short_title(title: str) -> str:
    if len(title) > SUBJECT_TITLE_LIMIT:
        return title[:SUBJECT_TITLE_LIMIT].strip()
    return title


def build_subject(publication: Publication) -> str:
    prefix = os.getenv("NOTIFICATION_SUBJECT_PREFIX", "PSI")
    parts = [prefix, publication.content_type or "", publication.publication_number]
    head = " ".join(part for part in parts if part)
    return f"{head} – {_short_title(publication.title)}"


def _build_attachment(publication: Publication) -> EmailAttachment | None:
    """Attach the publication's document only if it exists on disk."""
    if not publication.file_path:
        return None
    path = Path(publication.file_path)
    if not path.exists():
        return None
    return EmailAttachment(
        filename=publication.file_name or path.name,
        path=str(path),
    )


def _prepare_publication_data(publication: Publication) -> dict[str, Any]:
    """
    Extract and format every publication field the templates display.

    This does ALL data processing once so formatters only handle presentation.
    """
    today = datetime.now()
    heading = " ".join(
        part for part in [publication.content_type, publication.publication_number] if part
    )

    return {
        "heading": heading,
        "title": publication.title,
        "release_date": f"{today:%B} {today.day}, {today.year}",
        "year": today.year,
        "urgency": publication.urgency or "",
        "products": parse_tag_set(publication.products),
        "markets": parse_tag_set(publication.markets),
        "regions": parse_tag_set(publication.regions),
        "summary": publication.summary or "",
        "action_required": publication.action_required or "",
        "file_name": publication.file_name or "",
    }


def _build_notification_html(data: dict[str, Any], unsubscribe_url: str) -> str:
    """
    Build HTML email body for one publication notification.

    Args:
        data: Publication fields pre-extracted by _prepare_publication_data
        unsubscribe_url: One-click unsubscribe link for this recipient

    Returns:
        HTML string
    """
    applies_to = ""
    for label, values in (
        ("Products", data["products"]),
        ("Markets", data["markets"]),
        ("Regions", data["regions"]),
    ):
        if values:
            applies_to += f"""
                      <div style="font-size:13px; color:#444; line-height:1.55; margin:0 0 4px 0;"><strong>{label}:</strong> {escape(", ".join(values))}</div>"""

    html = f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{escape(data["heading"])}</title>
  </head>
  <body style="margin:0; padding:0; background-color:#f6f7f9;">
    <table role="presentation" cellpadding="0" cellspacing="0" width="100%" style="border-collapse:collapse; background-color:#f6f7f9;">
      <tr>
        <td align="center" style="padding:24px 12px;">
          <table role="presentation" cellpadding="0" cellspacing="0" width="650" style="max-width:650px; width:100%; border-collapse:collapse; background-color:#ffffff; border:1px solid #e6e8eb; border-radius:10px;">
            <tr>
              <td style="padding:18px 22px; background-color:#43A047; color:#ffffff; font-family:Arial, sans-serif;">
                <div style="font-size:16px; font-weight:700;">Publication Notification</div>
              </td>
            </tr>
            <tr>
              <td style="padding:22px; font-family:Arial, sans-serif; color:#222;">
                <div style="font-size:16px; font-weight:700; margin:0 0 10px 0;">{escape(data["heading"])}</div>
                <div style="font-size:14px; line-height:1.55; margin:0 0 14px 0;">
                  <strong>Title:</strong> {escape(data["title"])}<br>
                  <strong>Release Date:</strong> {data["release_date"]}<br>
                  <strong>Priority:</strong> {escape(data["urgency"])}
                </div>
                <table role="presentation" cellpadding="0" cellspacing="0" width="100%" style="border:1px solid #e6e8eb; background-color:#fbfbfc; border-radius:8px; margin:0 0 16px 0;">
                  <tr>
                    <td style="padding:14px; font-family:Arial, sans-serif;">
                      <div style="font-size:13px; font-weight:700; color:#222; margin:0 0 8px 0;">Applies To</div>{applies_to}
                    </td>
                  </tr>
                </table>
"""

    if data["summary"]:
        html += f"""
                <div style="font-size:14px; line-height:1.65; margin:0 0 12px 0;">
                  <strong>Summary</strong><br>
                  {escape(data["summary"])}
                </div>
"""

    if data["action_required"]:
        html += f"""
                <div style="border-left:4px solid #e67700; background-color:#fff7e6; padding:12px 14px; margin:0 0 16px 0;">
                  <div style="font-size:14px; line-height:1.55;">
                    <strong>Action Required</strong><br>
                    {escape(data["action_required"])}
                  </div>
                </div>
"""

    if data["file_name"]:
        html += f"""
                <div style="border:1px solid #e6e8eb; background-color:#fbfbfc; border-radius:8px; padding:14px; margin:0 0 16px 0;">
                  <div style="font-size:13px; color:#444; line-height:1.55;">
                    <strong>&#128206; Attached Document</strong><br>
                    {escape(data["file_name"])}
                  </div>
                </div>
"""

    html += f"""
                <div style="font-size:13px; color:#444; line-height:1.6; margin-top:14px;">
                  Questions: reply to this email or contact Technical Support.
                </div>
              </td>
            </tr>
            <tr>
              <td style="padding:16px 22px; background-color:#f3f4f6; font-family:Arial, sans-serif; color:#666; font-size:11px; line-height:1.5;">
                You received this notification based on your distribution profile.<br>
                &copy; {data["year"]}. All rights reserved.<br>
                <a href="{unsubscribe_url}" style="color:#888; text-decoration:underline;">Unsubscribe</a> from future notifications.
              </td>
            </tr>
          </table>
        </td>
      </tr>
    </table>
  </body>
</html>
"""

    return html


def _build_notification_text(data: dict[str, Any], unsubscribe_url: str) -> str:
    """Build plain text email body for one publication notification."""
    text = f"""{data["heading"]}

Title: {data["title"]}
Release Date: {data["release_date"]}
Priority: {data["urgency"]}

APPLIES TO
"""
    if data["products"]:
        text += f"Products: {', '.join(data['products'])}\n"
    if data["markets"]:
        text += f"Markets: {', '.join(data['markets'])}\n"
    if data["regions"]:
        text += f"Regions: {', '.join(data['regions'])}\n"

    if data["summary"]:
        text += f"\nSUMMARY\n{data['summary']}\n"

    if data["action_required"]:
        text += f"\nACTION REQUIRED\n{data['action_required']}\n"

    if data["file_name"]:
        text += f"\nAttached document: {data['file_name']}\n"

    text += f"""
Questions: reply to this email or contact Technical Support.

---
You received this notification based on your distribution profile.
Unsubscribe: {unsubscribe_url}
"""

    return text


def compose_notification(publication: Publication, customer: Customer) -> OutboundEmail:
    """Build the notification email for one recipient."""
    data = _prepare_publication_data(publication)
    unsubscribe_url = _build_unsubscribe_url(customer.email)

    return OutboundEmail(
        from_address=_get_from_address(),
        to=customer.email,
        cc=customer.cc_emails or None,
        subject=build_subject(publication),
        html=_build_notification_html(data, unsubscribe_url),
        text=_build_notification_text(data, unsubscribe_url),
        headers={"List-Unsubscribe": f"<{unsubscribe_url}>"},
        attachment=_build_attachment(publication),
    )


def send_publication_notification(
    publication: Publication, customer: Customer, transport: MailTransport
) -> dict[str, Any]:
    """
    Compose and send one notification. Never raises.

    Args:
        publication: Publication being distributed
        customer: Matched recipient
        transport: Mail transport to deliver through

    Returns:
        Dictionary with 'success' (bool), 'email_id' (str if sent), 'error' (str if failed)
    """
    try:
        message = compose_notification(publication, customer)
        print(f"  EMAIL: To={message.to} Subject=\"{message.subject}\"")
        if message.attachment:
            print(f"    Attaching: {message.attachment.filename}")
        result = transport.send(message)
    except Exception as e:
        result = {"success": False, "error": str(e)}

    if not result.get("success"):
        error_msg = result.get("error", "Unknown error")
        print(f"  ✗ Failed to send to {customer.email}: {error_msg}")
        log_notification_error(
            error_type="dispatch",
            error_message=error_msg,
            context={
                "publication_id": publication.id,
                "publication_number": publication.publication_number,
                "recipient_email": customer.email,
                "recipient_company": customer.company,
            },
        )

    return result
