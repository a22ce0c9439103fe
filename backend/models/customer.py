"""Pydantic models for subscriber (customer) records."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.types import (
    LEGACY_TIER_ALIASES,
    CustomerRecordID,
    CustomerStatus,
    SubscriptionTier,
)


class CustomerBase(BaseModel):
    """Subscriber profile fields shared by inserts and stored rows."""

    model_config = ConfigDict(str_strip_whitespace=True)

    contact_name: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    customer_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    cc_emails: str | None = None

    # Semicolon-joined tag sets, kept exactly as stored
    products: str | None = None
    markets: str | None = None
    content_types: str | None = None
    regions: str | None = None

    customer_type: str | None = None
    subscription_tier: str | None = None
    preferred_frequency: str | None = "Immediate"
    status: CustomerStatus = CustomerStatus.ACTIVE

    @field_validator("subscription_tier")
    @classmethod
    def normalize_legacy_tier(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return LEGACY_TIER_ALIASES.get(value, value)

    @property
    def tier(self) -> SubscriptionTier | None:
        return SubscriptionTier.parse(self.subscription_tier)

    @property
    def is_active(self) -> bool:
        return self.status == CustomerStatus.ACTIVE


class CustomerCreate(CustomerBase):
    """Customer data for database insertion (before ID assignment)."""

    def to_row(self) -> dict:
        return self.model_dump(mode="json")


class Customer(CustomerBase):
    """Complete customer record from database."""

    id: CustomerRecordID
    date_added: datetime | None = None
    last_notified: datetime | None = None


class SubscriptionRequest(BaseModel):
    """Self-service subscribe form input.

    Tag fields accept either a list of selected values (multi-select) or an
    already joined string.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    contact_name: str = ""
    company: str = ""
    email: str = ""
    cc_emails: str | None = None
    products: list[str] | str | None = None
    markets: list[str] | str | None = None
    content_types: list[str] | str | None = None
    regions: list[str] | str | None = None
    customer_type: str | None = None
    subscription_tier: str | None = None
