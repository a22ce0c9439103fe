"""Pydantic models for data validation and type checking."""

from models.customer import Customer, CustomerCreate, SubscriptionRequest
from models.distribution_log import DistributionLogCreate, DistributionLogEntry
from models.metadata import MetadataItem
from models.notification import EmailAttachment, OutboundEmail
from models.publication import DistributionSummary, Publication
from models.types import (
    CustomerStatus,
    DeliveryStatus,
    DistributionStatus,
    SubscriptionTier,
    TagCategory,
    Urgency,
)

__all__ = [
    "Customer",
    "CustomerCreate",
    "SubscriptionRequest",
    "Publication",
    "DistributionSummary",
    "DistributionLogCreate",
    "DistributionLogEntry",
    "MetadataItem",
    "OutboundEmail",
    "EmailAttachment",
    "CustomerStatus",
    "DeliveryStatus",
    "DistributionStatus",
    "SubscriptionTier",
    "TagCategory",
    "Urgency",
]
