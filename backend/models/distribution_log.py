"""Pydantic models for the distribution audit log."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from models.types import DeliveryStatus, LogEntryID


class DistributionLogCreate(BaseModel):
    """Snapshot of one send attempt, ready for insertion.

    Publication and recipient fields are copied, not referenced, so the log
    still reads correctly after the source records are edited or deleted.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    publication_number: str
    publication_title: str
    content_type: str | None = None
    urgency: str | None = None
    recipient_name: str
    recipient_company: str
    recipient_email: str
    delivery_status: DeliveryStatus = DeliveryStatus.SENT
    sent_date: datetime | None = None
    match_reason: str | None = None

    def to_row(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class DistributionLogEntry(DistributionLogCreate):
    """Stored log row."""

    id: LogEntryID
    acknowledged: bool = False
    acknowledgment_date: datetime | None = None
