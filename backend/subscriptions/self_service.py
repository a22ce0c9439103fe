"""
Self-service subscription management.

Backs the public subscribe and unsubscribe forms. Unsubscribing never deletes a
customer; it flips the status to Inactive so the distribution run skips them.
"""

from models import CustomerCreate, SubscriptionRequest
from models.types import CustomerStatus, SubscriptionTier
from distribution.tag_sets import coerce_tag_input
from notifications.unsubscribe_tokens import validate_unsubscribe_token
from shared.errors import InvalidInputError, NotFoundError
from shared.store import RecordStore, get_record_store

SELF_SERVICE_ID_PREFIX = "SELF-"
DEFAULT_CUSTOMER_TYPE = "End User"
DEFAULT_TIER = SubscriptionTier.ALL_ANNOUNCEMENTS.value


def _profile_fields(request: SubscriptionRequest) -> dict:
    """Flatten form input into the stored customer profile columns."""
    return {
        "contact_name": request.contact_name,
        "company": request.company,
        "cc_emails": request.cc_emails or "",
        "products": coerce_tag_input(request.products),
        "markets": coerce_tag_input(request.markets),
        "content_types": coerce_tag_input(request.content_types),
        "regions": coerce_tag_input(request.regions),
        "customer_type": request.customer_type or DEFAULT_CUSTOMER_TYPE,
        "subscription_tier": request.subscription_tier or DEFAULT_TIER,
    }


def subscribe(request: SubscriptionRequest, store: RecordStore | None = None) -> str:
    """
    Subscribe a customer, or reactivate an unsubscribed one.

    Args:
        request: Subscribe form input
        store: Record store (defaults to the configured Supabase store)

    Returns:
        "created" for a new customer, "reactivated" for a returning one

    Raises:
        InvalidInputError: If name, company or email is missing, or the email
            already has an active subscription
    """
    if not request.contact_name or not request.company or not request.email:
        raise InvalidInputError(
            "missing_required_fields", "Name, company, and email are required"
        )

    store = store or get_record_store()

    existing = store.find_customer_by_email(request.email)
    if existing is not None:
        if existing.status == CustomerStatus.INACTIVE:
            fields = _profile_fields(request)
            fields["status"] = CustomerStatus.ACTIVE.value
            store.update_customer(existing.id, fields)
            print(f"  ✓ Reactivated subscription for {request.email}")
            return "reactivated"
        raise InvalidInputError(
            "already_subscribed",
            "This email is already subscribed. Contact support to update your profile.",
        )

    customer_number = store.count_customers() + 1
    customer = CustomerCreate(
        customer_id=f"{SELF_SERVICE_ID_PREFIX}{customer_number:05d}",
        email=request.email,
        status=CustomerStatus.ACTIVE,
        **_profile_fields(request),
    )
    store.insert_customer(customer)
    print(f"  ✓ Subscribed {request.email} as {customer.customer_id}")
    return "created"


def unsubscribe(email: str, store: RecordStore | None = None) -> None:
    """
    Mark every customer row with this email as Inactive.

    Raises:
        NotFoundError: If no customer has this email
    """
    store = store or get_record_store()

    if store.find_customer_by_email(email) is None:
        raise NotFoundError(
            "customer_not_found", "Email address not found in our system."
        )

    store.deactivate_customers_by_email(email)
    print(f"  ✓ Unsubscribed {email}")


def unsubscribe_with_token(token: str, store: RecordStore | None = None) -> str:
    """
    Unsubscribe the address embedded in a signed unsubscribe token.

    Returns:
        The unsubscribed email address

    Raises:
        InvalidInputError: If the token is invalid or expired
        NotFoundError: If no customer has the token's email
    """
    email = validate_unsubscribe_token(token)
    if email is None:
        raise InvalidInputError(
            "invalid_token", "This unsubscribe link is invalid or has expired."
        )

    unsubscribe(email, store)
    return email
