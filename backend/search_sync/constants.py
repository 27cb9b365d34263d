"""Webflow collection layout and sync constants."""
from dataclasses import dataclass

# Webflow v2 returns at most 100 items per page
PAGE_SIZE = 100
WEBFLOW_ACCEPT_VERSION = "1.0.0"

GITHUB_ACCEPT = "application/vnd.github.v3+json"
DISPATCH_EVENT_TYPE = "webflow_publish"
DISPATCH_SOURCE = "webflow_webhook"
DEFAULT_COMMIT_MESSAGE = "Update search index"


@dataclass(frozen=True)
class ContentCollection:
    """A Webflow collection whose items land in the search index."""

    key: str
    collection_id: str
    url_prefix: str


@dataclass(frozen=True)
class ReferenceCollection:
    """A Webflow collection referenced by content items."""

    key: str
    collection_id: str
    name_field: str = "name"
    extra_fields: tuple[str, ...] = ()


# Iteration order here is the order of items in the output document.
CONTENT_COLLECTIONS: tuple[ContentCollection, ...] = (
    ContentCollection("blogs", "658f221d560869e694a6072e", "/blog"),
    ContentCollection("caseStudies", "658f221d560869e694a60732", "/case-studies"),
    ContentCollection("whitepapers", "658f221d560869e694a60735", "/whitepapers"),
    ContentCollection("webinars", "658f221d560869e694a60736", "/webinars"),
    ContentCollection("dataSheets", "658f221d560869e694a60734", "/data-sheets"),
    ContentCollection("pressReleases", "658f221d560869e694a60731", "/press-release"),
)

AUTHORS = ReferenceCollection("authors", "658f221d560869e694a6072f", extra_fields=("photo",))
RESOURCE_TYPES = ReferenceCollection("resource_types", "658f221d560869e694a60730")
USE_CASES = ReferenceCollection("use_cases", "658f221d560869e694a6072d")
INDUSTRIES = ReferenceCollection("industries", "658f221d560869e694a6072c")

REFERENCE_COLLECTIONS: tuple[ReferenceCollection, ...] = (
    AUTHORS,
    RESOURCE_TYPES,
    USE_CASES,
    INDUSTRIES,
)
