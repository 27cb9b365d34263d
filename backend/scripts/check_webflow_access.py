#!/usr/bin/env python3
"""One-shot check that the Webflow token can read the configured site."""
import sys

from search_sync.config import SYNC_REQUIRED, get_settings
from search_sync.constants import CONTENT_COLLECTIONS, REFERENCE_COLLECTIONS
from search_sync.exceptions import ConfigurationError, UpstreamFetchError
from search_sync.services.webflow import WebflowClient


def main() -> int:
    settings = get_settings()
    try:
        settings.require(*SYNC_REQUIRED)
    except ConfigurationError as exc:
        print(exc)
        return 2

    client = WebflowClient(settings)
    print(f"GET {client.base_url}/sites/{settings.webflow_site_id}/collections")
    try:
        collections = client.list_collections()
    except UpstreamFetchError as exc:
        body = (exc.body or "")[:400].replace("\n", "\\n")
        print(f"Status: {exc.status_code}")
        print(f"Body: {body}")
        return 3

    available = {c.get("id") for c in collections if isinstance(c, dict)}
    print(f"OK: {len(available)} collections visible")

    expected = [(c.key, c.collection_id) for c in CONTENT_COLLECTIONS + REFERENCE_COLLECTIONS]
    missing = [key for key, collection_id in expected if collection_id not in available]
    if missing:
        print(f"Missing collections: {', '.join(missing)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
