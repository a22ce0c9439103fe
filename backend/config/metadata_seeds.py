"""
Default tag vocabulary for a fresh metadata table.

Each category lists its values in display order. The first entry of each
category is that category's wildcard value.
"""

from models.types import TagCategory

DEFAULT_METADATA: dict[TagCategory, list[str]] = {
    TagCategory.PRODUCT: [
        "All Products",
        "8.8L GSI",
        "8.8L DSI",
        "22L DSI",
        "4.3L GSI",
        "6.0L GSI",
        "3.0L GSI",
        "2.4L GSI",
        "8.8L LPG",
    ],
    TagCategory.MARKET: [
        "All Markets",
        "Power Systems",
        "Industrial",
        "On-Road",
        "Material Handling",
        "Specialty",
        "Marine",
        "Oil & Gas",
        "Agriculture",
    ],
    TagCategory.CONTENT_TYPE: [
        "All Content Types",
        "Service Bulletin",
        "Notice of Change",
        "Manual Update",
        "Safety Notice",
        "Product Alert",
        "Recall Notice",
        "Technical Tip",
        "Training Notice",
        "Product Announcement",
    ],
    TagCategory.REGION: [
        "Global",
        "North America",
        "EMEA",
        "APAC",
        "LATAM",
    ],
}


def iter_default_metadata():
    """Yield (category, value, sort_order) rows for seeding."""
    for category, values in DEFAULT_METADATA.items():
        for sort_order, value in enumerate(values):
            yield category, value, sort_order
