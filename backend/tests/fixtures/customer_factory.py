"""Factory functions for creating test customer data."""

from typing import Any

from models import Customer

_next_id = 1000


def create_test_customer_row(
    customer_record_id: int | None = None,
    contact_name: str = "Test Contact",
    company: str = "Test Co",
    email: str = "contact@test.example.com",
    products: str | None = "All Products",
    markets: str | None = "All Markets",
    content_types: str | None = "All Content Types",
    regions: str | None = "Global",
    subscription_tier: str | None = "All Announcements",
    status: str = "Active",
    **overrides,
) -> dict[str, Any]:
    """
    Factory for creating a customer row as stored in the database.

    Defaults to a fully subscribed customer (every wildcard, top tier) so
    tests only override the fields they care about.
    """
    global _next_id
    if customer_record_id is None:
        _next_id += 1
        customer_record_id = _next_id

    row = {
        "id": customer_record_id,
        "contact_name": contact_name,
        "company": company,
        "customer_id": f"CUST-{customer_record_id:05d}",
        "email": email,
        "cc_emails": None,
        "products": products,
        "markets": markets,
        "content_types": content_types,
        "regions": regions,
        "customer_type": "Distributor",
        "subscription_tier": subscription_tier,
        "preferred_frequency": "Immediate",
        "status": status,
        "date_added": "2026-01-15T09:00:00",
        "last_notified": None,
    }
    row.update(overrides)
    return row


def create_test_customer(**kwargs) -> Customer:
    """Factory for creating a validated Customer model."""
    return Customer.model_validate(create_test_customer_row(**kwargs))
