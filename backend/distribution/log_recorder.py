"""Append-only recorder for the distribution audit log."""

from models import Customer, DistributionLogCreate, Publication
from models.types import DeliveryStatus
from shared.store import RecordStore
from shared.utils import utc_now_iso


def build_log_entry(
    publication: Publication,
    customer: Customer,
    status: DeliveryStatus,
    reason: str,
) -> DistributionLogCreate:
    """Snapshot publication and recipient identity at send time."""
    return DistributionLogCreate(
        publication_number=publication.publication_number,
        publication_title=publication.title,
        content_type=publication.content_type,
        urgency=publication.urgency,
        recipient_name=customer.contact_name,
        recipient_company=customer.company,
        recipient_email=customer.email,
        delivery_status=status,
        sent_date=utc_now_iso(),
        match_reason=reason,
    )


def record_distribution(
    store: RecordStore,
    publication: Publication,
    customer: Customer,
    status: DeliveryStatus,
    reason: str,
) -> DistributionLogCreate:
    """Append one log row for a send attempt. Store errors propagate."""
    entry = build_log_entry(publication, customer, status, reason)
    store.insert_distribution_log(entry)
    return entry
