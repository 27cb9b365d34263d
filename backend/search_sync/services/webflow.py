"""Webflow CMS collection reader."""
import logging
from typing import Any, Dict, List

import requests
from pydantic import ValidationError

from search_sync.config import Settings
from search_sync.constants import PAGE_SIZE, WEBFLOW_ACCEPT_VERSION
from search_sync.exceptions import UpstreamFetchError
from search_sync.schemas.webflow import WebflowItem, WebflowItemsPage

logger = logging.getLogger(__name__)


class WebflowClient:
    """Read live items from Webflow collections via the Data API v2."""

    def __init__(self, settings: Settings, http=None):
        self.base_url = settings.webflow_api_base_url.rstrip("/")
        self.site_id = settings.webflow_site_id
        self.timeout = settings.request_timeout_seconds
        self.headers = {
            "Authorization": f"Bearer {settings.webflow_api_token}",
            "accept-version": WEBFLOW_ACCEPT_VERSION,
        }
        # Anything exposing requests' get() signature
        self.http = http or requests

    def _api_get(self, path: str, params: Dict[str, Any], collection_id: str) -> Dict[str, Any]:
        """Call the Webflow API and return parsed JSON."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.http.get(
                url, headers=self.headers, params=params, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise UpstreamFetchError(collection_id, None, str(exc)) from exc

        if not response.ok:
            raise UpstreamFetchError(collection_id, response.status_code, response.text)
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamFetchError(
                collection_id, response.status_code, f"Invalid JSON: {exc}"
            ) from exc

    def fetch_page(self, collection_id: str, offset: int, limit: int = PAGE_SIZE) -> WebflowItemsPage:
        """Fetch one page of live items from a collection."""
        data = self._api_get(
            f"collections/{collection_id}/items/live",
            {"limit": limit, "offset": offset},
            collection_id,
        )
        try:
            return WebflowItemsPage.model_validate(data if isinstance(data, dict) else {})
        except ValidationError as exc:
            raise UpstreamFetchError(collection_id, None, f"Invalid page: {exc}") from exc

    def fetch_all_items(self, collection_id: str) -> List[WebflowItem]:
        """Fetch every live item of a collection, walking pages until a short page."""
        items: List[WebflowItem] = []
        offset = 0

        while True:
            page = self.fetch_page(collection_id, offset)
            items.extend(page.items)

            # A short page (possibly empty) is the last one
            if len(page.items) < PAGE_SIZE:
                break
            offset += PAGE_SIZE

        logger.debug("Fetched %s items from collection %s", len(items), collection_id)
        return items

    def list_collections(self) -> List[Dict[str, Any]]:
        """List the collections of the configured site."""
        data = self._api_get(
            f"sites/{self.site_id}/collections", {}, f"site:{self.site_id}"
        )
        collections = data.get("collections") if isinstance(data, dict) else None
        return collections if isinstance(collections, list) else []
