"""GitHub REST API client for index uploads and sync dispatch."""
import base64
import logging
from typing import Any, Dict

import requests

from search_sync.config import Settings
from search_sync.constants import GITHUB_ACCEPT
from search_sync.exceptions import DispatchError, PublishError
from search_sync.schemas.search_index import utc_timestamp
from search_sync.schemas.webhook import DispatchEvent, DispatchPayload

logger = logging.getLogger(__name__)


class GitHubClient:
    """Talk to a single repository through the GitHub REST API."""

    def __init__(self, settings: Settings, http=None):
        self.base_url = settings.github_api_base_url.rstrip("/")
        self.owner = settings.gh_owner
        self.repo = settings.gh_repo
        self.branch = settings.gh_branch or None
        self.timeout = settings.request_timeout_seconds
        self.headers = {
            "Authorization": f"Bearer {settings.gh_pat}",
            "Accept": GITHUB_ACCEPT,
            "Content-Type": "application/json",
        }
        self.http = http or requests

    @property
    def repo_url(self) -> str:
        return f"{self.base_url}/repos/{self.owner}/{self.repo}"

    def get_file_sha(self, path: str) -> str | None:
        """Return the blob sha of a file, or None if it does not exist.

        Lookup failures other than 404 are logged and treated as "no sha" so
        the upload can still attempt a fresh create.
        """
        params: Dict[str, Any] = {"ref": self.branch} if self.branch else {}
        try:
            response = self.http.get(
                f"{self.repo_url}/contents/{path}",
                headers=self.headers,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Could not read current sha of %s: %s", path, exc)
            return None

        if response.status_code == 404:
            return None
        if not response.ok:
            logger.warning(
                "Could not read current sha of %s: %s %s",
                path,
                response.status_code,
                response.text,
            )
            return None
        try:
            data = response.json()
        except ValueError:
            return None
        sha = data.get("sha") if isinstance(data, dict) else None
        return sha if isinstance(sha, str) else None

    def put_file(self, path: str, content: str, message: str, sha: str | None = None) -> Dict[str, Any]:
        """Create or update a file; raises PublishError when rejected."""
        body: Dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if sha:
            body["sha"] = sha
        if self.branch:
            body["branch"] = self.branch

        try:
            response = self.http.put(
                f"{self.repo_url}/contents/{path}",
                headers=self.headers,
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise PublishError(None, str(exc)) from exc

        if not response.ok:
            raise PublishError(response.status_code, response.text)
        try:
            return response.json()
        except ValueError:
            return {}

    def dispatch_sync(self) -> None:
        """Fire a repository_dispatch event that triggers a sync run."""
        event = DispatchEvent(client_payload=DispatchPayload(triggered_at=utc_timestamp()))
        try:
            response = self.http.post(
                f"{self.repo_url}/dispatches",
                headers=self.headers,
                json=event.model_dump(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise DispatchError(None, str(exc)) from exc

        if not response.ok:
            raise DispatchError(response.status_code, response.text)
