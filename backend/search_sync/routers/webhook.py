"""Webflow publish webhook router."""
import logging
import secrets

from fastapi import APIRouter, Depends, Header, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from search_sync.config import GITHUB_REQUIRED, WEBHOOK_REQUIRED, Settings, get_settings
from search_sync.exceptions import AuthorizationError, DispatchError
from search_sync.schemas.webhook import WebhookError, WebhookSuccess
from search_sync.services.github import GitHubClient

router = APIRouter()

logger = logging.getLogger(__name__)

# Common methods land on the handler; method_not_allowed_handler answers the rest.
WEBHOOK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=WebhookError(error=message).model_dump(),
        headers=headers,
    )


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """JSON 405 for webhook methods the route does not list (TRACE, WebDAV verbs)."""
    if exc.status_code == 405 and request.url.path.rstrip("/").endswith("/webhook"):
        return _error(405, "Method not allowed", headers={"Allow": "POST"})
    return await http_exception_handler(request, exc)


def verify_secret(provided: str | None, expected: str) -> None:
    """Raise AuthorizationError unless the provided secret matches."""
    if not provided or not secrets.compare_digest(
        provided.encode("utf-8"), expected.encode("utf-8")
    ):
        raise AuthorizationError("Webhook secret mismatch")


@router.api_route("/webhook", methods=WEBHOOK_METHODS)
def webflow_webhook(
    request: Request,
    x_webhook_secret: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    """Forward a Webflow publish event to GitHub as a sync dispatch."""
    if request.method != "POST":
        return _error(405, "Method not allowed", headers={"Allow": "POST"})

    if settings.missing(*WEBHOOK_REQUIRED):
        logger.error("Webhook secret is not configured")
        return _error(500, "Server misconfiguration")

    try:
        verify_secret(x_webhook_secret, settings.webhook_secret)
    except AuthorizationError:
        logger.error("Unauthorized webhook attempt")
        return _error(401, "Unauthorized")

    missing = settings.missing(*GITHUB_REQUIRED)
    if missing:
        logger.error("Missing GitHub configuration: %s", ", ".join(missing))
        return _error(500, "Server misconfiguration")

    try:
        GitHubClient(settings).dispatch_sync()
    except DispatchError as exc:
        logger.error("Failed to trigger workflow: %s", exc)
        return _error(500, "Failed to trigger sync")

    logger.info("Sync workflow triggered")
    return WebhookSuccess()
