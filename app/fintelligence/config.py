"""
Application configuration using Pydantic Settings.

Automatically loads environment variables from .env files.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenAI-compatible completion endpoint
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "ai_integrations_openai_api_key", "openai_api_key"
        ),
    )
    openai_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "ai_integrations_openai_base_url", "openai_base_url"
        ),
    )
    openai_model: str = "gpt-4o"

    # Request limits
    max_upload_bytes: int = 10 * 1024 * 1024
    max_json_body_bytes: int = 5 * 1024 * 1024
    max_prompt_chars: int = 8000

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    static_dir: Path = PACKAGE_DIR / "public"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",  # Vite development server
        "http://127.0.0.1:5173",
    ]

    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=PACKAGE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration loaded from environment.
    """
    return Settings()
