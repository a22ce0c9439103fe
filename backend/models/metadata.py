"""Pydantic models for the tag vocabulary (metadata catalog)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from models.types import MetadataItemID, TagCategory


class MetadataItem(BaseModel):
    """One curated tag value offered by the admin and subscribe forms."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: MetadataItemID
    category: TagCategory
    value: str = Field(..., min_length=1)
    sort_order: int = 0
    is_active: bool = True
    created_at: datetime | None = None
