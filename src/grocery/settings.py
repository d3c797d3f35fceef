"""Application settings loaded from ``GROCERY_*`` environment variables.

Domain infrastructure (databases, brokers, event store) is configured in
``domain.toml``; this module only holds what the HTTP layer needs.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GROCERY_", env_file=".env", extra="ignore")

    # Tokens
    jwt_secret: str = "grocery-dev-jwt-secret"
    jwt_issuer: str = "grocery-backoffice"
    token_ttl_seconds: int = 3600

    # Emails allowed to authenticate; empty means everyone with a valid token
    allowed_users: list[str] = []

    # API; credentials are only allowed with an explicit origin list
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
