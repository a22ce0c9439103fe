"""Shared type definitions for type checking.

Uses NewType for record IDs so a customer row id can't be passed where a
publication id is expected.

Uses closed enums for the free-text status fields stored in the database.
Urgency and subscription tier are parsed leniently (``parse`` returns None for
values the system doesn't recognize) because they come from admin-edited rows
and the tier gate handles the unknown case explicitly.
"""

from enum import Enum
from typing import NewType, TypeAlias

# Record IDs (database primary keys)
CustomerRecordID = NewType("CustomerRecordID", int)
PublicationID = NewType("PublicationID", int)
LogEntryID = NewType("LogEntryID", int)
MetadataItemID = NewType("MetadataItemID", int)

# Ordered list of trimmed tag tokens parsed from a "A; B; C" field
TagSet: TypeAlias = list[str]


class Urgency(str, Enum):
    CRITICAL_SAFETY = "Critical/Safety"
    HIGH = "High"
    STANDARD = "Standard"
    INFORMATIONAL = "Informational"

    @classmethod
    def parse(cls, value: str | None) -> "Urgency | None":
        """Return the matching urgency, or None for empty/unrecognized values."""
        if value is None:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


class SubscriptionTier(str, Enum):
    STANDARD = "Standard"
    ALL_ANNOUNCEMENTS = "All Announcements"

    @classmethod
    def parse(cls, value: str | None) -> "SubscriptionTier | None":
        """Return the matching tier (legacy aliases included), or None."""
        if value is None:
            return None
        value = LEGACY_TIER_ALIASES.get(value.strip(), value.strip())
        try:
            return cls(value)
        except ValueError:
            return None


# "Comprehensive" was renamed; old rows still carry it
LEGACY_TIER_ALIASES: dict[str, str] = {
    "Comprehensive": SubscriptionTier.ALL_ANNOUNCEMENTS.value,
}


class CustomerStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class DistributionStatus(str, Enum):
    DRAFT = "Draft"
    APPROVED = "Approved"
    DISTRIBUTED = "Distributed"


class DeliveryStatus(str, Enum):
    SENT = "Sent"
    RESENT = "Resent"


class TagCategory(str, Enum):
    """Metadata categories, valued as stored in the metadata table."""

    PRODUCT = "product"
    MARKET = "market"
    CONTENT_TYPE = "content_type"
    REGION = "region"

    @property
    def wildcard(self) -> str:
        return TAG_WILDCARDS[self]

    @property
    def group_key(self) -> str:
        """Plural key used when grouping catalog values for forms."""
        return CATEGORY_GROUP_KEYS[self]


TAG_WILDCARDS: dict[TagCategory, str] = {
    TagCategory.PRODUCT: "All Products",
    TagCategory.MARKET: "All Markets",
    TagCategory.CONTENT_TYPE: "All Content Types",
    TagCategory.REGION: "Global",
}

CATEGORY_GROUP_KEYS: dict[TagCategory, str] = {
    TagCategory.PRODUCT: "products",
    TagCategory.MARKET: "markets",
    TagCategory.CONTENT_TYPE: "content_types",
    TagCategory.REGION: "regions",
}
