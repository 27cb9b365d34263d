"""Webhook development server."""
import uvicorn

from search_sync.config import get_settings


def main() -> None:
    """Serve the webhook app; auto-reload only in the development environment."""
    settings = get_settings()
    uvicorn.run(
        "search_sync.main:app",
        host=settings.webhook_host,
        port=settings.webhook_port,
        reload=settings.app_env == "development",
        log_level="info",
    )


if __name__ == "__main__":
    main()
