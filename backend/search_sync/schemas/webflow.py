"""Webflow Data API v2 schemas."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WebflowItem(BaseModel):
    """A single CMS item as returned by the items API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    field_data: dict[str, Any] = Field(default_factory=dict, alias="fieldData")
    is_draft: bool = Field(default=False, alias="isDraft")
    is_archived: bool = Field(default=False, alias="isArchived")
    last_published: str | None = Field(default=None, alias="lastPublished")

    @field_validator("field_data", mode="before")
    @classmethod
    def coerce_field_data(cls, value: Any) -> Any:
        """Treat a null or non-object field bag as empty."""
        return value if isinstance(value, dict) else {}

    @field_validator("is_draft", "is_archived", mode="before")
    @classmethod
    def coerce_flags(cls, value: Any) -> bool:
        return bool(value)


class WebflowPagination(BaseModel):
    """Pagination block of a list response."""

    limit: int | None = None
    offset: int | None = None
    total: int | None = None


class WebflowItemsPage(BaseModel):
    """One page of a collection items list."""

    model_config = ConfigDict(extra="ignore")

    items: list[WebflowItem] = Field(default_factory=list)
    pagination: WebflowPagination | None = None

    @field_validator("items", mode="before")
    @classmethod
    def coerce_items(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []
