"""
Metadata catalog: the curated product, market, content type and region values.

The catalog only governs what the forms offer. Matching treats tags as opaque
strings and never checks them against it.
"""

from config.metadata_seeds import iter_default_metadata
from models.types import TagCategory
from notifications.error_logger import log_notification_error
from shared.errors import InvalidInputError, NotFoundError
from shared.store import RecordStore, get_record_store

MOVE_DIRECTIONS = ("up", "down")


def _parse_category(category: str | TagCategory) -> TagCategory:
    try:
        return TagCategory(category)
    except ValueError:
        raise InvalidInputError(
            "unknown_category", f"Unknown metadata category: {category}"
        ) from None


def get_metadata(store: RecordStore | None = None) -> dict[str, list[str]]:
    """
    Active catalog values grouped by category, in display order.

    Returns:
        Dictionary with keys products, markets, content_types, regions
    """
    store = store or get_record_store()

    grouped: dict[str, list[str]] = {category.group_key: [] for category in TagCategory}
    items = sorted(
        store.list_metadata(active_only=True),
        key=lambda item: (item.sort_order, item.value),
    )
    for item in items:
        grouped[item.category.group_key].append(item.value)
    return grouped


def add_metadata_value(
    category: str | TagCategory, value: str, store: RecordStore | None = None
) -> str:
    """
    Append a new value at the end of its category.

    Returns:
        The stored (trimmed) value

    Raises:
        InvalidInputError: If the value is empty, the category is unknown, or
            the value already exists in the category
    """
    value = (value or "").strip()
    if not category or not value:
        raise InvalidInputError(
            "missing_required_fields", "Category and value are required"
        )
    tag_category = _parse_category(category)

    store = store or get_record_store()

    if store.find_metadata_value(tag_category, value) is not None:
        raise InvalidInputError("duplicate_value", "This value already exists")

    siblings = store.list_metadata(category=tag_category)
    next_order = max((item.sort_order for item in siblings), default=-1) + 1
    store.insert_metadata(tag_category, value, next_order)
    return value


def rename_metadata_value(
    item_id: int, value: str, store: RecordStore | None = None
) -> str:
    """
    Rename a catalog value.

    Existing customer and publication tags keep the old spelling; they are
    plain strings, not references.

    Raises:
        InvalidInputError: If the new value is empty or already used in the category
        NotFoundError: If the item doesn't exist
    """
    value = (value or "").strip()
    if not value:
        raise InvalidInputError("empty_value", "Value cannot be empty")

    store = store or get_record_store()

    item = store.get_metadata_item(item_id)
    if item is None:
        raise NotFoundError("metadata_not_found", "Item not found")

    existing = store.find_metadata_value(item.category, value)
    if existing is not None and existing.id != item_id:
        raise InvalidInputError(
            "duplicate_value", "A value with that name already exists"
        )

    store.update_metadata(item_id, {"value": value})
    return value


def remove_metadata_value(item_id: int, store: RecordStore | None = None) -> None:
    store = store or get_record_store()
    store.delete_metadata(item_id)


def move_metadata_value(
    item_id: int, direction: str, store: RecordStore | None = None
) -> bool:
    """
    Swap an item with its neighbour in display order.

    The category is renumbered 0..n-1 first so gaps and ties in sort_order
    don't break the swap.

    Returns:
        True if the item moved, False if it was already at that end

    Raises:
        InvalidInputError: If direction is not "up" or "down"
        NotFoundError: If the item doesn't exist
    """
    if direction not in MOVE_DIRECTIONS:
        raise InvalidInputError("invalid_direction", f"Invalid direction: {direction}")

    store = store or get_record_store()

    item = store.get_metadata_item(item_id)
    if item is None:
        raise NotFoundError("metadata_not_found", "Item not found")

    siblings = sorted(
        store.list_metadata(category=item.category),
        key=lambda sibling: (sibling.sort_order, sibling.value),
    )
    index = next((i for i, s in enumerate(siblings) if s.id == item_id), None)
    if index is None:
        return False

    swap_index = index - 1 if direction == "up" else index + 1
    if swap_index < 0 or swap_index >= len(siblings):
        return False

    for position, sibling in enumerate(siblings):
        store.update_metadata(sibling.id, {"sort_order": position})

    store.update_metadata(siblings[index].id, {"sort_order": swap_index})
    store.update_metadata(siblings[swap_index].id, {"sort_order": index})
    return True


def reorder_metadata(item_ids: list[int], store: RecordStore | None = None) -> int:
    """
    Set sort order from list position (drag-and-drop reorder).

    Returns:
        Number of items updated; items whose update fails are skipped

    Raises:
        InvalidInputError: If item_ids is empty
    """
    if not item_ids:
        raise InvalidInputError("invalid_ids", "Invalid ids array")

    store = store or get_record_store()

    updated = 0
    for position, item_id in enumerate(item_ids):
        try:
            store.update_metadata(int(item_id), {"sort_order": position})
            updated += 1
        except Exception as e:
            print(f"  ✗ Could not reorder metadata item {item_id}: {e}")
            log_notification_error(
                error_type="catalog",
                error_message=str(e),
                context={"item_id": item_id, "position": position},
            )

    return updated


def seed_default_metadata(store: RecordStore | None = None) -> int:
    """
    Insert the default vocabulary into an empty catalog.

    Returns:
        Number of values inserted (0 if the catalog already had values)
    """
    store = store or get_record_store()

    if store.list_metadata():
        return 0

    inserted = 0
    for category, value, sort_order in iter_default_metadata():
        store.insert_metadata(category, value, sort_order)
        inserted += 1

    print(f"Seeded {inserted} default metadata values.")
    return inserted
