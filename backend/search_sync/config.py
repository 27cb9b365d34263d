"""Application configuration."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from search_sync.exceptions import ConfigurationError


ENV_FILE_BACKEND = Path(__file__).resolve().parents[1] / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_BACKEND),
        extra="ignore",
    )

    # Webflow CMS
    webflow_api_token: str = ""
    webflow_site_id: str = ""
    webflow_api_base_url: str = "https://api.webflow.com/v2"

    # GitHub (dispatch + index upload)
    gh_pat: str = ""
    gh_owner: str = ""
    gh_repo: str = ""
    gh_branch: str = ""
    gh_index_path: str = "search-index.json"
    github_api_base_url: str = "https://api.github.com"

    # Webhook
    webhook_secret: str = ""
    webhook_host: str = "127.0.0.1"
    webhook_port: int = 8000

    # Output
    search_index_path: str = "search-index.json"

    # HTTP
    request_timeout_seconds: int = 30

    # Application
    app_env: str = "development"

    def missing(self, *names: str) -> list[str]:
        """Return the env var names of required options that are unset."""
        return [name.upper() for name in names if not getattr(self, name)]

    def require(self, *names: str) -> None:
        """Raise ConfigurationError listing every required option that is unset."""
        missing = self.missing(*names)
        if missing:
            raise ConfigurationError(missing)


# Options required by each entry point
SYNC_REQUIRED = ("webflow_api_token", "webflow_site_id")
GITHUB_REQUIRED = ("gh_pat", "gh_owner", "gh_repo")
WEBHOOK_REQUIRED = ("webhook_secret",)


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
