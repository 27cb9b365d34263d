"""Search index persistence: local file and GitHub upload."""
import logging
import os
import tempfile
from pathlib import Path

from search_sync.constants import DEFAULT_COMMIT_MESSAGE
from search_sync.schemas.search_index import SearchIndexDocument
from search_sync.services.github import GitHubClient

logger = logging.getLogger(__name__)


class IndexPublisher:
    """Write the search index locally and/or to a GitHub repository."""

    def __init__(
        self,
        output_path: str | Path,
        github: GitHubClient | None = None,
        remote_path: str | None = None,
        commit_message: str = DEFAULT_COMMIT_MESSAGE,
    ):
        self.output_path = Path(output_path)
        self.github = github
        self.remote_path = remote_path or self.output_path.name
        self.commit_message = commit_message

    def write_local(self, document: SearchIndexDocument) -> Path:
        """Atomically replace the local index file.

        The document is written to a sibling temp file first, so a failed
        write never leaves a truncated index behind.
        """
        target = self.output_path
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(document.to_json())
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Wrote %s items to %s", document.total_items, target)
        return target

    def publish_remote(self, document: SearchIndexDocument) -> None:
        """Upload the index as a new revision of the repository file.

        Raises PublishError when the upload is rejected.
        """
        if self.github is None:
            raise RuntimeError("No GitHub client configured for remote publish")

        path = self.remote_path
        sha = self.github.get_file_sha(path)
        logger.info(
            "Uploading %s to %s/%s (%s)",
            path,
            self.github.owner,
            self.github.repo,
            "update" if sha else "create",
        )
        self.github.put_file(path, document.to_json(), self.commit_message, sha=sha)
        logger.info("Published search index to GitHub")
