"""Pydantic schemas for API payloads and the search index."""
from search_sync.schemas.search_index import (
    SearchIndexAuthor,
    SearchIndexDocument,
    SearchIndexItem,
)
from search_sync.schemas.webflow import WebflowItem, WebflowItemsPage
from search_sync.schemas.webhook import (
    DispatchEvent,
    DispatchPayload,
    WebhookError,
    WebhookSuccess,
)

__all__ = [
    "SearchIndexAuthor",
    "SearchIndexDocument",
    "SearchIndexItem",
    "WebflowItem",
    "WebflowItemsPage",
    "DispatchEvent",
    "DispatchPayload",
    "WebhookError",
    "WebhookSuccess",
]
