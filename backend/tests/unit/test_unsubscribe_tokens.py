"""
Unit tests for unsubscribe token generation and validation.
"""

import hashlib
import os
import unittest

from itsdangerous import URLSafeTimedSerializer

from notifications.unsubscribe_tokens import (
    generate_unsubscribe_token,
    validate_unsubscribe_token,
    unsubscribe_tokens_configured,
    UNSUBSCRIBE_SALT,
)


class TestUnsubscribeTokens(unittest.TestCase):
    """Test token generation and validation logic."""

    def setUp(self):
        """Set up test environment with secret key."""
        self.original_secret = os.environ.get("UNSUBSCRIBE_SECRET_KEY")
        os.environ["UNSUBSCRIBE_SECRET_KEY"] = (
            "test-secret-key-for-testing-must-be-at-least-32-chars-long"
        )

    def tearDown(self):
        """Restore original environment."""
        if self.original_secret:
            os.environ["UNSUBSCRIBE_SECRET_KEY"] = self.original_secret
        else:
            os.environ.pop("UNSUBSCRIBE_SECRET_KEY", None)

    def test_generate_token_is_url_safe(self):
        """Generated token contains only URL-safe characters."""
        token = generate_unsubscribe_token("pat@acme.example.com")

        allowed_chars = set(
            "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_."
        )
        self.assertGreater(len(token), 0)
        self.assertTrue(all(c in allowed_chars for c in token))

    def test_validate_token_returns_email(self):
        token = generate_unsubscribe_token("pat@acme.example.com")

        self.assertEqual(validate_unsubscribe_token(token), "pat@acme.example.com")

    def test_validate_token_returns_none_for_invalid_token(self):
        self.assertIsNone(validate_unsubscribe_token("this-is-not-a-valid-token"))

    def test_tampered_token_fails_validation(self):
        token = generate_unsubscribe_token("pat@acme.example.com")
        tampered = token[:-1] + ("Z" if token[-1] != "Z" else "A")

        self.assertIsNone(validate_unsubscribe_token(tampered))

    def test_token_from_other_secret_fails_validation(self):
        other = URLSafeTimedSerializer(
            "another-secret-key-must-be-at-least-32-chars-long",
            salt=UNSUBSCRIBE_SALT,
            signer_kwargs={"digest_method": hashlib.sha256},
        )
        token = other.dumps("pat@acme.example.com")

        self.assertIsNone(validate_unsubscribe_token(token))

    def test_non_string_payload_rejected(self):
        secret = os.environ["UNSUBSCRIBE_SECRET_KEY"]
        serializer = URLSafeTimedSerializer(
            secret,
            salt=UNSUBSCRIBE_SALT,
            signer_kwargs={"digest_method": hashlib.sha256},
        )
        token = serializer.dumps({"email": "pat@acme.example.com"})

        self.assertIsNone(validate_unsubscribe_token(token))

    def test_missing_secret_raises_on_generate(self):
        os.environ.pop("UNSUBSCRIBE_SECRET_KEY", None)

        with self.assertRaises(ValueError):
            generate_unsubscribe_token("pat@acme.example.com")

    def test_configured_flag_follows_secret(self):
        self.assertTrue(unsubscribe_tokens_configured())

        os.environ.pop("UNSUBSCRIBE_SECRET_KEY", None)

        self.assertFalse(unsubscribe_tokens_configured())

    def test_missing_secret_validates_to_none(self):
        token = generate_unsubscribe_token("pat@acme.example.com")
        os.environ.pop("UNSUBSCRIBE_SECRET_KEY", None)

        self.assertIsNone(validate_unsubscribe_token(token))


if __name__ == "__main__":
    unittest.main()
