"""Admin-curated tag vocabulary offered by the customer and publication forms."""

from .metadata_catalog import (
    add_metadata_value,
    get_metadata,
    move_metadata_value,
    remove_metadata_value,
    rename_metadata_value,
    reorder_metadata,
    seed_default_metadata,
)

__all__ = [
    'get_metadata',
    'add_metadata_value',
    'rename_metadata_value',
    'remove_metadata_value',
    'move_metadata_value',
    'reorder_metadata',
    'seed_default_metadata',
]
