"""wkbread configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Decoder
    WKB_MAX_DEPTH: int = 64  # Deepest accepted geometry nesting level

    # CLI output
    CLI_INDENT: int = 2  # JSON indentation for --json output


# Singleton instance for import convenience
settings = Settings()
