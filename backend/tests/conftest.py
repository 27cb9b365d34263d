from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from search_sync.config import Settings
from search_sync.schemas.webflow import WebflowItem


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else str(payload))

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON payload")
        return self._payload


class FakeHttp:
    """Records calls and answers them through per-method handlers."""

    def __init__(
        self,
        get: Optional[Callable[..., FakeResponse]] = None,
        put: Optional[Callable[..., FakeResponse]] = None,
        post: Optional[Callable[..., FakeResponse]] = None,
    ):
        self._handlers = {"get": get, "put": put, "post": post}
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []

    def _call(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        handler = self._handlers[method]
        if handler is None:
            raise AssertionError(f"unexpected {method.upper()} {url}")
        return handler(url, **kwargs)

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._call("get", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._call("put", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._call("post", url, **kwargs)


_ITEMS_URL = re.compile(r"/collections/(?P<collection_id>[^/]+)/items/live$")


def webflow_pages(
    collections: Dict[str, List[Dict[str, Any]]],
    failures: Optional[Dict[str, Tuple[int, int, str]]] = None,
) -> Callable[..., FakeResponse]:
    """GET handler serving raw items per collection id, paginated.

    ``failures`` maps a collection id to ``(offset, status, body)``: the page
    at that offset answers with the given error instead.
    """
    failures = failures or {}

    def handler(url: str, params: Dict[str, Any] | None = None, **_: Any) -> FakeResponse:
        match = _ITEMS_URL.search(url)
        assert match, f"unexpected url {url}"
        collection_id = match.group("collection_id")
        params = params or {}
        offset, limit = int(params["offset"]), int(params["limit"])
        failure = failures.get(collection_id)
        if failure and failure[0] == offset:
            return FakeResponse(failure[1], text=failure[2])
        items = collections.get(collection_id, [])
        page = items[offset : offset + limit]
        return FakeResponse(
            200,
            {
                "items": page,
                "pagination": {"limit": limit, "offset": offset, "total": len(items)},
            },
        )

    return handler


def raw_item(item_id: str, **field_data: Any) -> Dict[str, Any]:
    """A raw Webflow item as returned by the API."""
    return {
        "id": item_id,
        "isDraft": False,
        "isArchived": False,
        "lastPublished": "2024-05-01T10:00:00.000Z",
        "fieldData": field_data,
    }


def webflow_item(item_id: str, **field_data: Any) -> WebflowItem:
    return WebflowItem.model_validate(raw_item(item_id, **field_data))


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "webflow_api_token": "wf-token",
        "webflow_site_id": "site-123",
        "webflow_api_base_url": "https://api.webflow.test/v2",
        "gh_pat": "gh-token",
        "gh_owner": "acme",
        "gh_repo": "search-index",
        "gh_branch": "",
        "gh_index_path": "search-index.json",
        "github_api_base_url": "https://api.github.test",
        "webhook_secret": "s3cret",
        "search_index_path": "search-index.json",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()
