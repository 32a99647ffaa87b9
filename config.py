# link-shortener/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shortener import DEFAULT_TOKEN_LENGTH, MAX_TOKEN_LENGTH


class Settings(BaseSettings):
    """Service settings, read from environment variables (HOST, PORT, ...)."""

    host: str = Field(default="0.0.0.0", description="Interface to bind to")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to listen on")
    token_length: int = Field(
        default=DEFAULT_TOKEN_LENGTH,
        ge=1,
        le=MAX_TOKEN_LENGTH,
        description="Hex characters kept from the URL digest. Shorter tokens collide sooner.",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
