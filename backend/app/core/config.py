"""Application configuration."""

from functools import lru_cache
from typing import Any

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domains.core import ConfigurationError

# Admin portal username is fixed; only the password is configurable.
ADMIN_USERNAME = "admin"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # 忽略 .env 中的额外变量
    )

    # Project info
    PROJECT_NAME: str = "Candy Registry API"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8084

    # CORS (middleware is only installed when non-empty)
    CORS_ORIGINS: list[str] = []

    # Admin portal
    ADMIN_PASSWORD: SecretStr

    @field_validator("ADMIN_PASSWORD")
    @classmethod
    def _password_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("must not be empty")
        return value


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, failing with ConfigurationError.

    Keyword overrides are passed straight to ``Settings`` (tests use
    ``_env_file=None`` to ignore a local ``.env``).
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        raise ConfigurationError(key, first.get("msg", str(e))) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
