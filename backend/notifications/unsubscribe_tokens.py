"""
Signed unsubscribe links for publication notifications.

Every notification carries a link whose token holds the recipient's primary
email address. Following it unsubscribes that address, which sets every
customer row sharing the email to Inactive (see subscriptions.self_service).
Tokens are stateless, signed with UNSUBSCRIBE_SECRET_KEY and honored for 90
days by default.
"""

import os
import hashlib
from typing import Optional
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

UNSUBSCRIBE_SALT = "publication-unsubscribe"
DEFAULT_MAX_AGE_DAYS = 90


def unsubscribe_tokens_configured() -> bool:
    """True when a signing secret is available for unsubscribe tokens."""
    return bool(os.getenv("UNSUBSCRIBE_SECRET_KEY"))


def _get_serializer() -> URLSafeTimedSerializer:
    """
    Raises:
        ValueError: If UNSUBSCRIBE_SECRET_KEY environment variable not set
    """
    secret_key = os.getenv("UNSUBSCRIBE_SECRET_KEY")
    if not secret_key:
        raise ValueError("UNSUBSCRIBE_SECRET_KEY environment variable must be set.")

    return URLSafeTimedSerializer(
        secret_key,
        salt=UNSUBSCRIBE_SALT,
        signer_kwargs={"digest_method": hashlib.sha256},
    )


def generate_unsubscribe_token(email: str) -> str:
    """
    Sign a recipient address for the notification footer link.

    The token is keyed by email, not by customer row, so one link covers a
    contact listed under several companies.

    Raises:
        ValueError: If UNSUBSCRIBE_SECRET_KEY not configured
    """
    return _get_serializer().dumps(email)


def validate_unsubscribe_token(
    token: str, max_age_days: int = DEFAULT_MAX_AGE_DAYS
) -> Optional[str]:
    """
    Recover the recipient address from a footer link token.

    Returns None for tampered, expired or foreign tokens, for payloads that
    aren't an address string, and when no secret is configured.
    """
    try:
        serializer = _get_serializer()
        email = serializer.loads(token, max_age=max_age_days * 24 * 60 * 60)
    except (BadSignature, SignatureExpired, ValueError, TypeError):
        return None
    if not isinstance(email, str):
        return None
    return email
