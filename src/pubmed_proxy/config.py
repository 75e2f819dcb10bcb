"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from pubmed_proxy.constants import DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # API Keys
    ncbi_api_key: str = ""

    # Upstream
    request_timeout: float = DEFAULT_TIMEOUT

    # Plugin manifest
    plugin_contact_email: str = "contact@example.com"
    plugin_legal_info_url: str = "https://example.com/legal"

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
