"""Search index output schemas."""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SearchIndexModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchIndexAuthor(SearchIndexModel):
    """Resolved author reference."""

    name: str | None = None
    photo: Any = None


class SearchIndexItem(SearchIndexModel):
    """One flattened, search-ready record."""

    id: str
    collection: str
    resource_type: str | None = None
    title: str = ""
    slug: str = ""
    url: str
    excerpt: str = ""
    thumbnail: str | None = None
    published_date: Any = None
    author: SearchIndexAuthor | None = None
    use_cases: list[str] = Field(default_factory=list)
    industries: list[str] = Field(default_factory=list)


class SearchIndexDocument(SearchIndexModel):
    """The full search index file."""

    last_updated: str
    total_items: int
    items: list[SearchIndexItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_total_items(self) -> "SearchIndexDocument":
        if self.total_items != len(self.items):
            raise ValueError(
                f"totalItems ({self.total_items}) does not match item count ({len(self.items)})"
            )
        return self

    @classmethod
    def from_items(
        cls, items: list[SearchIndexItem], last_updated: str | None = None
    ) -> "SearchIndexDocument":
        """Build a document whose count is derived from the items."""
        return cls(
            last_updated=last_updated or utc_timestamp(),
            total_items=len(items),
            items=items,
        )

    def to_json(self) -> str:
        """Serialize as the on-disk JSON representation."""
        return self.model_dump_json(by_alias=True, indent=2)
