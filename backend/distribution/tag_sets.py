"""
Parsing and serialization of semicolon-delimited tag sets.

Customer and publication records store products, markets, content types and
regions as flat strings like "8.8L GSI; 22L DSI". These helpers are the only
place that splits or joins them.
"""

from typing import Iterable

from models.types import TagCategory, TagSet

TAG_SEPARATOR = ";"
TAG_JOINER = "; "


def parse_tag_set(raw: str | None) -> TagSet:
    """
    Split a stored tag field into an ordered list of trimmed tokens.

    Empty tokens are dropped. Order is preserved and duplicates are kept.

    Examples:
        >>> parse_tag_set(" A ;B; ;C")
        ['A', 'B', 'C']
        >>> parse_tag_set(None)
        []
    """
    if not raw:
        return []
    return [token.strip() for token in raw.split(TAG_SEPARATOR) if token.strip()]


def join_tag_set(tokens: Iterable[str]) -> str:
    """Serialize tokens back to the stored "A; B; C" form."""
    return TAG_JOINER.join(tokens)


def coerce_tag_input(value: list[str] | str | None) -> str:
    """
    Normalize multi-select form input to a stored tag field.

    A list of selected values is joined as-is; a single string is stored
    unchanged; missing input becomes an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return join_tag_set(value)


def has_wildcard(tags: TagSet, category: TagCategory) -> bool:
    """True if the tag set contains the category's wildcard value."""
    return category.wildcard in tags


def overlaps(left: TagSet, right: TagSet) -> bool:
    """True if the two tag sets share at least one token (exact, case-sensitive)."""
    right_tokens = set(right)
    return any(token in right_tokens for token in left)
