"""Webhook and dispatch schemas."""
from pydantic import BaseModel

from search_sync.constants import DISPATCH_EVENT_TYPE, DISPATCH_SOURCE


class DispatchPayload(BaseModel):
    """Client payload attached to a repository dispatch event."""

    triggered_at: str
    source: str = DISPATCH_SOURCE


class DispatchEvent(BaseModel):
    """Body of a GitHub repository_dispatch request."""

    event_type: str = DISPATCH_EVENT_TYPE
    client_payload: DispatchPayload


class WebhookSuccess(BaseModel):
    """Response returned once a sync has been triggered."""

    success: bool = True
    message: str = "Sync triggered"


class WebhookError(BaseModel):
    """Error response returned by the webhook."""

    error: str
