"""Webflow item -> search index item normalization."""
from typing import Any, Dict

from search_sync.constants import ContentCollection
from search_sync.schemas.search_index import SearchIndexAuthor, SearchIndexItem
from search_sync.schemas.webflow import WebflowItem
from search_sync.services.indexing.fields import first_present
from search_sync.services.indexing.lookups import ReferenceLookups, resolve_ref, resolve_refs

# Candidate field names, in precedence order. Collections name the same
# concept differently (blogs use "resource-types", case studies "resource-type").
RESOURCE_TYPE_FIELDS = ("resource-types", "resource-type")
TITLE_FIELDS = ("name", "title")
SLUG_FIELDS = ("slug",)
EXCERPT_FIELDS = ("excerpt", "post-summary", "description")
THUMBNAIL_FIELDS = ("image.url", "thumbnail.url", "featured-image.url")
PUBLISHED_DATE_FIELDS = ("publish-date", "published-date", "date")
AUTHOR_FIELD = "author"
USE_CASES_FIELD = "use-cases"
INDUSTRIES_FIELD = "industries"


def build_author(fields: Dict[str, Any], lookups: ReferenceLookups) -> SearchIndexAuthor | None:
    """Resolve the author reference; None when the item has no author."""
    author_id = fields.get(AUTHOR_FIELD)
    if not author_id:
        return None
    entry = lookups.authors.get(author_id) if isinstance(author_id, str) else None
    entry = entry or {}
    name = entry.get("name")
    return SearchIndexAuthor(
        name=name if isinstance(name, str) and name else None,
        photo=entry.get("photo") or None,
    )


def build_url(collection: ContentCollection, slug: str) -> str:
    """Public path of an item; the bare prefix when the slug is empty."""
    if not slug:
        return collection.url_prefix
    return f"{collection.url_prefix}/{slug}"


def normalize_item(
    item: WebflowItem,
    collection: ContentCollection,
    lookups: ReferenceLookups,
) -> SearchIndexItem:
    """Flatten one raw Webflow item into the search index shape.

    Never raises on a malformed field bag: every field degrades to its
    default (empty string or None) instead.
    """
    fields = item.field_data

    resource_type_id = first_present(fields, RESOURCE_TYPE_FIELDS, kind=str)
    resource_type = (
        resolve_ref(resource_type_id, lookups.resource_types) if resource_type_id else None
    )

    slug = first_present(fields, SLUG_FIELDS, "", kind=str)

    return SearchIndexItem(
        id=item.id,
        collection=collection.key,
        resource_type=resource_type,
        title=first_present(fields, TITLE_FIELDS, "", kind=str),
        slug=slug,
        url=build_url(collection, slug),
        excerpt=first_present(fields, EXCERPT_FIELDS, "", kind=str),
        thumbnail=first_present(fields, THUMBNAIL_FIELDS, kind=str),
        published_date=first_present(fields, PUBLISHED_DATE_FIELDS),
        author=build_author(fields, lookups),
        use_cases=resolve_refs(fields.get(USE_CASES_FIELD), lookups.use_cases),
        industries=resolve_refs(fields.get(INDUSTRIES_FIELD), lookups.industries),
    )
