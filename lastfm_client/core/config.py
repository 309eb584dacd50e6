"""Configuration management for the Last.fm client."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Last.fm credentials
    lastfm_api_key: str = ""
    lastfm_shared_secret: str = ""

    # Endpoints
    lastfm_api_url: str = "https://ws.audioscrobbler.com/2.0/"
    lastfm_auth_url: str = "https://www.last.fm/api/auth/"

    # HTTP
    http_timeout_seconds: float = 30.0
    user_agent: str = "lastfm-client/0.1.0"

    @property
    def has_credentials(self) -> bool:
        """Check if both API key and shared secret are configured."""
        return bool(self.lastfm_api_key and self.lastfm_shared_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
