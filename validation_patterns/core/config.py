"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "Development"
PRODUCTION = "Production"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Hosting environment. ``Development`` exposes
            exception details in error responses.
        debug: Enable debug mode (API docs). Must be False in production.
        api_host: Interface the development server binds to.
        api_port: Port the development server listens on.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_enabled: Turn rate limiting on or off.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Minimal API Validation Patterns"
    version: str = "0.1.0"
    environment: str = PRODUCTION
    debug: bool = False
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    log_level: str = "INFO"
    rate_limit_default: str = "120/minute"
    rate_limit_enabled: bool = True

    @property
    def is_development(self) -> bool:
        """Return True when running in the development environment."""
        return self.environment.strip().lower() == DEVELOPMENT.lower()


settings = Settings()
