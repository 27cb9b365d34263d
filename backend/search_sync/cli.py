"""Command-line entry point for the search index sync."""
import argparse
import asyncio
import logging

from search_sync.config import GITHUB_REQUIRED, SYNC_REQUIRED, Settings, get_settings
from search_sync.constants import DEFAULT_COMMIT_MESSAGE
from search_sync.exceptions import ConfigurationError, PublishError, UpstreamFetchError
from search_sync.services.github import GitHubClient
from search_sync.services.indexing.orchestrator import SearchIndexBuilder
from search_sync.services.publisher import IndexPublisher
from search_sync.services.webflow import WebflowClient

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2
# Local index written, GitHub upload rejected
EXIT_PUBLISH_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-index-sync",
        description="Sync Webflow CMS collections into a unified search index.",
    )
    parser.add_argument(
        "--output",
        help="Local output path (default: SEARCH_INDEX_PATH or search-index.json)",
    )
    parser.add_argument(
        "--publish",
        action="store_true",
        help="Also upload the index to GitHub via the contents API",
    )
    parser.add_argument(
        "--no-local",
        action="store_true",
        help="Skip the local write (requires --publish)",
    )
    parser.add_argument(
        "--commit-message",
        default=DEFAULT_COMMIT_MESSAGE,
        help="Commit message for the uploaded revision",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _format_counts(counts: dict) -> str:
    return ", ".join(f"{key}={count}" for key, count in counts.items()) or "none"


def run_sync(
    settings: Settings,
    output: str,
    publish: bool = False,
    write_local: bool = True,
    commit_message: str = DEFAULT_COMMIT_MESSAGE,
) -> int:
    """Build the index and persist it; returns a process exit code."""
    builder = SearchIndexBuilder(WebflowClient(settings))
    try:
        document = asyncio.run(builder.build())
    except UpstreamFetchError as exc:
        logger.error("Sync failed: %s", exc)
        return EXIT_FAILURE

    publisher = IndexPublisher(
        output,
        github=GitHubClient(settings) if publish else None,
        remote_path=settings.gh_index_path,
        commit_message=commit_message,
    )

    if write_local:
        try:
            publisher.write_local(document)
        except OSError as exc:
            logger.error("Failed to write %s: %s", output, exc)
            return EXIT_FAILURE

    if publish:
        try:
            publisher.publish_remote(document)
        except PublishError as exc:
            logger.error("Remote publish failed: %s", exc)
            return EXIT_PUBLISH_FAILED if write_local else EXIT_FAILURE

    logger.info("Lookups: %s", _format_counts(builder.stats["lookups"]))
    logger.info("Collections: %s", _format_counts(builder.stats["collections"]))
    logger.info(
        "Done! %s total items, last updated %s",
        builder.stats["total_items"],
        document.last_updated,
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.no_local and not args.publish:
        parser.error("--no-local requires --publish")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = get_settings()
    required = SYNC_REQUIRED + (GITHUB_REQUIRED if args.publish else ())
    try:
        settings.require(*required)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG

    return run_sync(
        settings,
        output=args.output or settings.search_index_path,
        publish=args.publish,
        write_local=not args.no_local,
        commit_message=args.commit_message,
    )


if __name__ == "__main__":
    raise SystemExit(main())
