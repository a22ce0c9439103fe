"""
Integration test: the unsubscribe link in a notification removes the customer
from the next distribution run.
"""

import os
import unittest
from urllib.parse import parse_qs, urlparse
from unittest.mock import patch

from distribution.orchestrator import distribute_publication
from models import SubscriptionRequest
from subscriptions.self_service import subscribe, unsubscribe_with_token
from tests.fixtures.fake_store import InMemoryRecordStore
from tests.fixtures.mock_helpers import create_mock_transport
from tests.fixtures.publication_factory import create_test_publication_row

TEST_ENV = {
    "UNSUBSCRIBE_SECRET_KEY": "test-secret-key-for-testing-must-be-at-least-32-chars-long",
    "FRONTEND_BASE_URL": "https://test.example.com",
}


class TestUnsubscribeFlow(unittest.TestCase):

    def setUp(self):
        for patcher in (
            patch.dict(os.environ, TEST_ENV),
            patch("builtins.print"),
            patch("notifications.email_sender.log_notification_error"),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_subscribe_receive_unsubscribe_resubscribe(self):
        store = InMemoryRecordStore(
            publications=[
                create_test_publication_row(publication_id=1),
                create_test_publication_row(
                    publication_id=2, publication_number="SB-2026-002"
                ),
            ]
        )
        request = SubscriptionRequest(
            contact_name="Sam Ortiz",
            company="Harbor Industrial",
            email="sam@harbor.example.com",
            products=["8.8L GSI"],
            markets=["Industrial"],
            content_types=["Service Bulletin"],
            regions=["North America"],
        )
        self.assertEqual(subscribe(request, store=store), "created")

        transport = create_mock_transport()
        first = distribute_publication(1, store=store, transport=transport)
        self.assertEqual(first.matched_emails, ["sam@harbor.example.com"])

        message = transport.send.call_args[0][0]
        unsubscribe_url = message.headers["List-Unsubscribe"].strip("<>")
        token = parse_qs(urlparse(unsubscribe_url).query)["token"][0]

        self.assertEqual(unsubscribe_with_token(token, store=store), "sam@harbor.example.com")

        second = distribute_publication(2, store=store, transport=transport)
        self.assertEqual(second.recipients_count, 0)
        self.assertEqual(transport.send.call_count, 1)

        self.assertEqual(subscribe(request, store=store), "reactivated")
        third = distribute_publication(2, store=store, transport=transport)
        self.assertEqual(third.recipients_count, 1)


if __name__ == "__main__":
    unittest.main()
