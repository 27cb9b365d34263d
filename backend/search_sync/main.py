"""FastAPI application entry point for the publish webhook."""
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from search_sync import __version__

app = FastAPI(
    title="Search Index Sync Webhook",
    description="Receives Webflow publish webhooks and triggers a search index sync",
    version=__version__,
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Search Index Sync Webhook", "version": __version__}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Import and include routers
from search_sync.routers import webhook

app.include_router(webhook.router, prefix="/api", tags=["webhook"])
app.add_exception_handler(StarletteHTTPException, webhook.method_not_allowed_handler)
