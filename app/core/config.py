"""Configuration management for Movie/Book Finder."""

from functools import lru_cache
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.media import MediaType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OMDb credential; movie search is disabled without it
    omdb_api_key: SecretStr | None = None

    # Local favorites file
    favorites_path: Path = Path("favorites.json")

    # Network settings
    # Proxy configuration in the format http://host:port or socks5://host:port
    proxy: str | None = None

    @field_validator("omdb_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("proxy")
    @classmethod
    def validate_proxy(cls, v: str | None) -> str | None:
        if v is None:
            return v

        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https", "socks4", "socks5", "socks5h"):
            raise ValueError(
                "Proxy must be a valid URL with scheme http/https/socks4/socks5/socks5h"
            )
        if not parsed.netloc:
            raise ValueError("Proxy must have a host and port")
        return v

    # App settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


class Capabilities(BaseModel):
    """Which media types can be searched, resolved once at startup."""

    movie_search: bool
    book_search: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "Capabilities":
        return cls(movie_search=settings.omdb_api_key is not None)

    def enabled(self, media_type: MediaType) -> bool:
        if media_type == MediaType.MOVIE:
            return self.movie_search
        return self.book_search


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
