"""Custom exceptions for the search index sync."""


class SearchSyncError(Exception):
    """Base exception for search index sync errors."""

    pass


class ConfigurationError(SearchSyncError):
    """Raised when required configuration options are missing."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


class UpstreamFetchError(SearchSyncError):
    """Raised when the Webflow API returns a non-success response."""

    def __init__(self, collection_id: str, status_code: int | None, body: str):
        self.collection_id = collection_id
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Failed to fetch collection {collection_id}: {status_code} {body}"
        )


class AuthorizationError(SearchSyncError):
    """Raised when a webhook request carries the wrong shared secret."""

    pass


class PublishError(SearchSyncError):
    """Raised when the remote store rejects the index upload."""

    def __init__(self, status_code: int | None, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"GitHub API error: {status_code} {body}")


class DispatchError(SearchSyncError):
    """Raised when the sync dispatch event is rejected."""

    def __init__(self, status_code: int | None, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"GitHub API error: {status_code} {body}")
