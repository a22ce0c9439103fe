"""
Recipient matching for publication distribution.

Decides whether a customer's subscription profile covers a publication.
Pure functions only: no store access, no side effects.
"""

from models import Customer, Publication
from models.types import SubscriptionTier, TagCategory, Urgency
from distribution.tag_sets import has_wildcard, overlaps, parse_tag_set

# Tiers that receive High and Standard urgency publications
STANDARD_NOTICE_TIERS = frozenset(
    {SubscriptionTier.STANDARD, SubscriptionTier.ALL_ANNOUNCEMENTS}
)


def _category_matches(
    publication_raw: str | None, customer_raw: str | None, category: TagCategory
) -> bool:
    """
    Check one tag category.

    Only the customer's wildcard is special. A wildcard value on the
    publication side (e.g. a publication tagged "Global") is an ordinary tag.
    """
    customer_tags = parse_tag_set(customer_raw)
    if has_wildcard(customer_tags, category):
        return True
    return overlaps(parse_tag_set(publication_raw), customer_tags)


def product_matches(publication: Publication, customer: Customer) -> bool:
    return _category_matches(publication.products, customer.products, TagCategory.PRODUCT)


def market_matches(publication: Publication, customer: Customer) -> bool:
    return _category_matches(publication.markets, customer.markets, TagCategory.MARKET)


def content_type_matches(publication: Publication, customer: Customer) -> bool:
    """Publications carry a single content type, not a set."""
    customer_types = parse_tag_set(customer.content_types)
    if has_wildcard(customer_types, TagCategory.CONTENT_TYPE):
        return True
    return publication.content_type in customer_types


def region_matches(publication: Publication, customer: Customer) -> bool:
    return _category_matches(publication.regions, customer.regions, TagCategory.REGION)


def tier_allows(urgency: Urgency | None, tier: SubscriptionTier | None) -> bool:
    """
    Urgency-dependent subscription tier gate.

    - Critical/Safety reaches every tier.
    - High and Standard reach the Standard and All Announcements tiers.
    - Informational reaches All Announcements only.
    - Unrecognized urgency is unrestricted (kept from the legacy behavior,
      pending a product decision).
    """
    if urgency is None:
        return True
    if urgency == Urgency.CRITICAL_SAFETY:
        return True
    if urgency in (Urgency.HIGH, Urgency.STANDARD):
        return tier in STANDARD_NOTICE_TIERS
    if urgency == Urgency.INFORMATIONAL:
        return tier == SubscriptionTier.ALL_ANNOUNCEMENTS
    raise ValueError(f"Unhandled urgency: {urgency!r}")


def matches(publication: Publication, customer: Customer) -> bool:
    """
    Check if a customer should receive a publication.

    All five conditions are AND-ed together. Within each tag category, a
    single shared tag (or the customer's wildcard) is enough.

    Args:
        publication: Publication being distributed
        customer: Candidate recipient profile

    Returns:
        True if the customer matches the publication
    """
    return (
        product_matches(publication, customer)
        and market_matches(publication, customer)
        and content_type_matches(publication, customer)
        and region_matches(publication, customer)
        and tier_allows(publication.urgency_level, customer.tier)
    )


def describe_match(customer: Customer) -> str:
    """Human-readable snapshot of the profile fields that drove a match."""
    return (
        f"Products: {customer.products or ''}, "
        f"Markets: {customer.markets or ''}, "
        f"Content Types: {customer.content_types or ''}, "
        f"Regions: {customer.regions or ''}, "
        f"Tier: {customer.subscription_tier or ''}"
    )
