"""
Record store for customers, publications, distribution logs and metadata.

Thin wrapper over the Supabase query builder that returns validated Pydantic
models. Services take a RecordStore instead of building queries themselves, so
tests can swap in a mocked client or an in-memory fake.
"""

from typing import Any

from pydantic import ValidationError
from supabase import Client

from models import (
    Customer,
    CustomerCreate,
    DistributionLogCreate,
    DistributionLogEntry,
    MetadataItem,
    Publication,
)
from models.types import CustomerStatus, LEGACY_TIER_ALIASES, TagCategory
from notifications.error_logger import log_notification_error
from shared.db import (
    CUSTOMERS_TABLE,
    DISTRIBUTION_LOGS_TABLE,
    METADATA_TABLE,
    PUBLICATIONS_TABLE,
    get_supabase_client,
)


def validate_customer_rows(rows: list[dict[str, Any]]) -> list[Customer]:
    """
    Validate customer rows one at a time for batch reads.

    A row the model rejects is reported and skipped so the remaining
    customers are still returned.
    """
    customers = []
    for row in rows:
        try:
            customers.append(Customer.model_validate(row))
        except ValidationError as e:
            print(f"  ⚠️  Skipping malformed customer row {row.get('id')}: {e}")
            log_notification_error(
                error_type="customer_record",
                error_message=str(e),
                context={"customer_record_id": row.get("id"), "email": row.get("email")},
            )
    return customers


class RecordStore:
    """Load/insert/update access to the four flat tables."""

    def __init__(self, client: Client):
        self.client = client

    def _first(self, response: Any) -> dict[str, Any] | None:
        if not response.data:
            return None
        return response.data[0]

    # Publications

    def get_publication(self, publication_id: int) -> Publication | None:
        response = (
            self.client.table(PUBLICATIONS_TABLE)
            .select("*")
            .eq("id", publication_id)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return Publication.model_validate(row) if row else None

    def find_publication_by_number(self, publication_number: str) -> Publication | None:
        """Resolve a publication by its human-facing number.

        Numbers aren't unique in the table; the oldest row (lowest id) wins.
        """
        response = (
            self.client.table(PUBLICATIONS_TABLE)
            .select("*")
            .eq("publication_number", publication_number)
            .order("id", desc=False)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return Publication.model_validate(row) if row else None

    def update_publication(self, publication_id: int, fields: dict[str, Any]) -> None:
        self.client.table(PUBLICATIONS_TABLE).update(fields).eq(
            "id", publication_id
        ).execute()

    # Customers

    def list_active_customers(self) -> list[Customer]:
        response = (
            self.client.table(CUSTOMERS_TABLE)
            .select("*")
            .eq("status", CustomerStatus.ACTIVE.value)
            .order("id", desc=False)
            .execute()
        )
        return validate_customer_rows(response.data or [])

    def get_customer(self, customer_record_id: int) -> Customer | None:
        response = (
            self.client.table(CUSTOMERS_TABLE)
            .select("*")
            .eq("id", customer_record_id)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return Customer.model_validate(row) if row else None

    def find_customer_by_email(self, email: str) -> Customer | None:
        response = (
            self.client.table(CUSTOMERS_TABLE)
            .select("*")
            .eq("email", email)
            .order("id", desc=False)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return Customer.model_validate(row) if row else None

    def find_customer_by_email_and_company(
        self, email: str, company: str
    ) -> Customer | None:
        response = (
            self.client.table(CUSTOMERS_TABLE)
            .select("*")
            .eq("email", email)
            .eq("company", company)
            .order("id", desc=False)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return Customer.model_validate(row) if row else None

    def insert_customer(self, customer: CustomerCreate) -> None:
        self.client.table(CUSTOMERS_TABLE).insert(customer.to_row()).execute()

    def update_customer(self, customer_record_id: int, fields: dict[str, Any]) -> None:
        self.client.table(CUSTOMERS_TABLE).update(fields).eq(
            "id", customer_record_id
        ).execute()

    def deactivate_customers_by_email(self, email: str) -> None:
        self.client.table(CUSTOMERS_TABLE).update(
            {"status": CustomerStatus.INACTIVE.value}
        ).eq("email", email).execute()

    def count_customers(self) -> int:
        response = (
            self.client.table(CUSTOMERS_TABLE).select("id", count="exact").execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def normalize_legacy_tiers(self) -> int:
        """Rewrite legacy tier aliases in place. Returns rows updated."""
        updated = 0
        for legacy, current in LEGACY_TIER_ALIASES.items():
            response = (
                self.client.table(CUSTOMERS_TABLE)
                .update({"subscription_tier": current})
                .eq("subscription_tier", legacy)
                .execute()
            )
            updated += len(response.data or [])
        return updated

    # Distribution logs

    def insert_distribution_log(self, entry: DistributionLogCreate) -> None:
        self.client.table(DISTRIBUTION_LOGS_TABLE).insert(entry.to_row()).execute()

    def get_distribution_log(self, log_id: int) -> DistributionLogEntry | None:
        response = (
            self.client.table(DISTRIBUTION_LOGS_TABLE)
            .select("*")
            .eq("id", log_id)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return DistributionLogEntry.model_validate(row) if row else None

    def count_distribution_logs(self) -> int:
        response = (
            self.client.table(DISTRIBUTION_LOGS_TABLE)
            .select("id", count="exact")
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    # Metadata catalog

    def list_metadata(
        self, category: TagCategory | None = None, active_only: bool = False
    ) -> list[MetadataItem]:
        query = self.client.table(METADATA_TABLE).select("*")
        if category is not None:
            query = query.eq("category", category.value)
        if active_only:
            query = query.eq("is_active", True)
        response = (
            query.order("category").order("sort_order").order("value").execute()
        )
        return [MetadataItem.model_validate(row) for row in response.data or []]

    def get_metadata_item(self, item_id: int) -> MetadataItem | None:
        response = (
            self.client.table(METADATA_TABLE)
            .select("*")
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return MetadataItem.model_validate(row) if row else None

    def find_metadata_value(
        self, category: TagCategory, value: str
    ) -> MetadataItem | None:
        response = (
            self.client.table(METADATA_TABLE)
            .select("*")
            .eq("category", category.value)
            .eq("value", value)
            .limit(1)
            .execute()
        )
        row = self._first(response)
        return MetadataItem.model_validate(row) if row else None

    def insert_metadata(self, category: TagCategory, value: str, sort_order: int) -> None:
        self.client.table(METADATA_TABLE).insert(
            {"category": category.value, "value": value, "sort_order": sort_order}
        ).execute()

    def update_metadata(self, item_id: int, fields: dict[str, Any]) -> None:
        self.client.table(METADATA_TABLE).update(fields).eq("id", item_id).execute()

    def delete_metadata(self, item_id: int) -> None:
        self.client.table(METADATA_TABLE).delete().eq("id", item_id).execute()


def get_record_store() -> RecordStore:
    """Build a RecordStore on the configured Supabase project."""
    return RecordStore(get_supabase_client())
