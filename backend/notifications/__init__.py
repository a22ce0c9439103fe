"""
Notification delivery for the publication distribution system.

This module handles:
- Composing publication notification emails
- Delivering them through a pluggable mail transport (Resend or no-op)
- Signed one-click unsubscribe tokens
- Error report files for failed sends
"""

from .email_sender import compose_notification, send_publication_notification
from .transport import MailTransport, NullTransport, ResendTransport, get_mail_transport

__all__ = [
    'compose_notification',
    'send_publication_notification',
    'MailTransport',
    'NullTransport',
    'ResendTransport',
    'get_mail_transport',
]
