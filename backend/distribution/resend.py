"""
Operator-triggered re-sends of logged notifications.

A re-send re-resolves the *current* publication (by publication number) and the
*current* customer (by email and company) from a historical log entry, then
dispatches and logs again with delivery status Resent.
"""

from models import Customer, DistributionLogEntry, Publication
from models.types import DeliveryStatus
from distribution.log_recorder import record_distribution
from notifications.email_sender import send_publication_notification
from notifications.error_logger import log_notification_error
from notifications.transport import MailTransport, get_mail_transport
from shared.errors import InvalidInputError, NotFoundError
from shared.store import RecordStore, get_record_store

MANUAL_RESEND_REASON = "Manual resend"
BULK_RESEND_REASON = "Bulk resend"


def _resolve(
    store: RecordStore, log_id: int
) -> tuple[DistributionLogEntry, Publication, Customer]:
    log_entry = store.get_distribution_log(log_id)
    if log_entry is None:
        raise NotFoundError("log_entry_not_found", "Log entry not found")

    publication = store.find_publication_by_number(log_entry.publication_number)
    customer = store.find_customer_by_email_and_company(
        log_entry.recipient_email, log_entry.recipient_company
    )
    if publication is None or customer is None:
        raise NotFoundError(
            "resend_target_not_found",
            "Could not find original publication or customer record",
            {
                "log_id": log_id,
                "publication_found": publication is not None,
                "customer_found": customer is not None,
            },
        )

    return log_entry, publication, customer


def resend_log_entry(
    log_id: int,
    store: RecordStore | None = None,
    transport: MailTransport | None = None,
    reason: str = MANUAL_RESEND_REASON,
) -> Customer:
    """
    Re-send the notification behind one log entry.

    Returns:
        The customer the notification was re-sent to

    Raises:
        NotFoundError: If the log entry, publication or customer can't be resolved
            (nothing is sent or logged in that case)
    """
    store = store or get_record_store()
    transport = transport or get_mail_transport()

    _, publication, customer = _resolve(store, log_id)

    send_publication_notification(publication, customer, transport)
    record_distribution(store, publication, customer, DeliveryStatus.RESENT, reason)

    print(f"  ✓ Resent notification to {customer.contact_name} ({customer.email})")
    return customer


def resend_bulk(
    log_ids: list[int],
    store: RecordStore | None = None,
    transport: MailTransport | None = None,
) -> int:
    """
    Re-send several log entries, skipping any that fail.

    Returns:
        Number of entries successfully re-sent

    Raises:
        InvalidInputError: If no log ids were given
    """
    if not log_ids:
        raise InvalidInputError("no_log_entries", "No log entries selected")

    store = store or get_record_store()
    transport = transport or get_mail_transport()

    count = 0
    for log_id in log_ids:
        try:
            resend_log_entry(log_id, store, transport, reason=BULK_RESEND_REASON)
            count += 1
        except NotFoundError as e:
            print(f"  ⊘ Skipped log entry {log_id}: {e}")
        except Exception as e:
            print(f"  ✗ Error resending log entry {log_id}: {e}")
            log_notification_error(
                error_type="resend",
                error_message=str(e),
                context={"log_id": log_id},
            )

    return count
