"""Application configuration using pydantic-settings."""

import warnings
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Sentinel value that indicates unconfigured credentials
_UNCONFIGURED_API_KEY = "CHANGE_ME"

# Find .env file: check backend dir first, then project root
_BACKEND_DIR = Path(__file__).parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent
_ENV_FILE = _BACKEND_DIR / ".env" if (_BACKEND_DIR / ".env").exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    IMPORTANT: API keys must be explicitly configured via environment
    variables or .env file. Default values use the 'CHANGE_ME' sentinel
    to make misconfiguration obvious.
    """

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Projection
    # Deepest relation nesting that is projected; anything below becomes {}.
    max_projection_depth: int = Field(default=10, ge=1)

    # Authentication: bearer tokens mapped to access levels
    api_key: str = _UNCONFIGURED_API_KEY
    admin_api_key: str = _UNCONFIGURED_API_KEY

    # CORS (comma-separated origins)
    cors_origins: str = "http://localhost:3000"

    # Application
    debug: bool = False
    log_level: str = "INFO"

    @staticmethod
    def is_configured(value: str) -> bool:
        """Return True if a credential has been set to a real value."""
        return bool(value) and value != _UNCONFIGURED_API_KEY

    def model_post_init(self, __context) -> None:
        """Warn about unconfigured credentials."""
        if self.api_key == _UNCONFIGURED_API_KEY:
            warnings.warn(
                "API_KEY not configured! Set API_KEY environment variable.",
                UserWarning,
                stacklevel=2,
            )
        if self.admin_api_key == _UNCONFIGURED_API_KEY:
            warnings.warn(
                "ADMIN_API_KEY not configured! Set ADMIN_API_KEY environment variable.",
                UserWarning,
                stacklevel=2,
            )


settings = Settings()
