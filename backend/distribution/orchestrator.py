"""
Distribution of approved publications to matching customers.

One distribution run loads the publication and every Active customer, collects
the customers that match, then sends and logs each notification on a thread
pool. Each send+log task is isolated: one recipient's failure never cancels the
others. The publication row is updated once, after every task has settled.
"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed

from models import Customer, DistributionSummary, Publication
from models.types import DeliveryStatus, DistributionStatus
from distribution.log_recorder import record_distribution
from distribution.matcher import describe_match, matches
from notifications.email_sender import send_publication_notification
from notifications.error_logger import log_notification_error
from notifications.transport import MailTransport, get_mail_transport
from shared.errors import InvalidInputError, NotFoundError
from shared.store import RecordStore, get_record_store
from shared.utils import utc_now_iso

DEFAULT_MAX_WORKERS = 4


def _get_max_workers() -> int:
    try:
        return max(1, int(os.getenv("DISTRIBUTION_MAX_WORKERS", DEFAULT_MAX_WORKERS)))
    except ValueError:
        return DEFAULT_MAX_WORKERS


def find_recipients(publication: Publication, customers: list[Customer]) -> list[Customer]:
    """Filter customers down to those whose profile matches the publication."""
    recipients = []
    for customer in customers:
        match = matches(publication, customer)
        print(
            f"  Checking {customer.contact_name} ({customer.company}): "
            f"{'MATCH' if match else 'NO MATCH'}"
        )
        if match:
            recipients.append(customer)
    return recipients


def _deliver(
    store: RecordStore,
    transport: MailTransport,
    publication: Publication,
    customer: Customer,
) -> dict:
    """
    Send one notification, then log it.

    The log row records the attempt, so it is written even when the send
    failed. Only a store failure on the log write is raised.
    """
    result = send_publication_notification(publication, customer, transport)
    record_distribution(
        store,
        publication,
        customer,
        DeliveryStatus.SENT,
        describe_match(customer),
    )
    return result


def distribute_publication(
    publication_id: int,
    store: RecordStore | None = None,
    transport: MailTransport | None = None,
    max_workers: int | None = None,
) -> DistributionSummary | None:
    """
    Send an approved publication to every matching Active customer.

    Not idempotent: running it again re-sends to all current matches and
    appends new log rows. Callers guard against double approval.

    Args:
        publication_id: ID of the publication to distribute
        store: Record store (defaults to the configured Supabase store)
        transport: Mail transport (defaults to get_mail_transport())
        max_workers: Fan-out thread count (defaults to DISTRIBUTION_MAX_WORKERS)

    Returns:
        DistributionSummary, or None if the publication doesn't exist
    """
    store = store or get_record_store()
    transport = transport or get_mail_transport()

    print(f"Starting distribution for publication ID: {publication_id}")

    publication = store.get_publication(publication_id)
    if publication is None:
        print(f"  ⚠️  Publication {publication_id} not found, nothing distributed")
        log_notification_error(
            error_type="distribution",
            error_message="Publication not found",
            context={"publication_id": publication_id},
        )
        return None

    print(f"Distributing: {publication.title} ({publication.publication_number})")

    customers = store.list_active_customers()
    print(f"Found {len(customers)} active customers")

    recipients = find_recipients(publication, customers)
    summary = DistributionSummary(
        publication_id=publication.id,
        publication_number=publication.publication_number,
        active_customers=len(customers),
        recipients_count=len(recipients),
        matched_emails=[customer.email for customer in recipients],
    )

    if recipients:
        with ThreadPoolExecutor(max_workers=max_workers or _get_max_workers()) as executor:
            futures = {
                executor.submit(_deliver, store, transport, publication, customer): customer
                for customer in recipients
            }

            for future in as_completed(futures):
                customer = futures[future]
                try:
                    result = future.result()
                    if not result.get("success"):
                        summary.failed_sends += 1
                except Exception as e:
                    summary.failed_log_writes += 1
                    print(f"  ✗ Could not log distribution to {customer.email}: {e}")
                    log_notification_error(
                        error_type="logging",
                        error_message=str(e),
                        context={
                            "publication_id": publication.id,
                            "publication_number": publication.publication_number,
                            "recipient_email": customer.email,
                        },
                    )

    store.update_publication(
        publication.id,
        {
            "distribution_status": DistributionStatus.DISTRIBUTED.value,
            "date_published": utc_now_iso(),
            "recipients_count": summary.recipients_count,
        },
    )

    print(f"Distribution complete: {summary.recipients_count} recipients")
    return summary


def approve_publication(
    publication_id: int,
    store: RecordStore | None = None,
    transport: MailTransport | None = None,
) -> DistributionSummary | None:
    """
    Approve a publication and distribute it immediately.

    Raises:
        NotFoundError: If the publication doesn't exist
        InvalidInputError: If the publication was already distributed
    """
    store = store or get_record_store()

    publication = store.get_publication(publication_id)
    if publication is None:
        raise NotFoundError("publication_not_found", "Publication not found")
    if publication.is_distributed:
        raise InvalidInputError(
            "already_distributed",
            f"Publication {publication.publication_number} was already distributed",
        )

    store.update_publication(
        publication_id, {"distribution_status": DistributionStatus.APPROVED.value}
    )
    return distribute_publication(publication_id, store=store, transport=transport)
