"""Pydantic models for publication records."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from models.types import DistributionStatus, PublicationID, Urgency


class Publication(BaseModel):
    """Complete publication record from database."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: PublicationID
    title: str = Field(..., min_length=1)
    publication_number: str = Field(..., min_length=1)

    # Semicolon-joined tag sets; content_type is a single value
    products: str | None = None
    markets: str | None = None
    content_type: str | None = None
    regions: str | None = None

    urgency: str | None = None
    summary: str | None = None
    action_required: str | None = None
    author_name: str | None = None
    reviewer: str | None = None

    distribution_status: DistributionStatus = DistributionStatus.DRAFT
    date_published: datetime | None = None
    recipients_count: int = Field(0, ge=0)

    file_path: str | None = None
    file_name: str | None = None

    @property
    def urgency_level(self) -> Urgency | None:
        return Urgency.parse(self.urgency)

    @property
    def is_distributed(self) -> bool:
        return self.distribution_status == DistributionStatus.DISTRIBUTED


class DistributionSummary(BaseModel):
    """Outcome of one distribution run."""

    publication_id: PublicationID
    publication_number: str
    active_customers: int = 0
    recipients_count: int = 0
    matched_emails: list[str] = Field(default_factory=list)
    failed_sends: int = 0
    failed_log_writes: int = 0
