"""Configuration management for Reddit Media Viewer."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables.

    Viewer inputs (credentials, feed names, sort, layout) are never read from
    here; they arrive with each request.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RV_", extra="ignore")

    # Reddit endpoints
    token_url: str = "https://www.reddit.com/api/v1/access_token"
    api_base_url: str = "https://oauth.reddit.com"
    user_agent: str = "reddit-media-viewer/1.0"
    http_timeout_seconds: float = 15

    # Query defaults
    default_limit: int = Field(default=5, ge=1, le=100)

    # Uploads
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MiB

    # CORS
    frontend_origin: str = "http://localhost:8000"

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
