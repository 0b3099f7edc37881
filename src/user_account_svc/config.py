"""
Application settings.

Values come from environment variables prefixed with ``USER_ACCOUNT_`` (or a
``.env`` file). The signing secret has no default and must be supplied.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-wide configuration, loaded once at startup.
    """
    model_config = SettingsConfigDict(
        env_prefix="USER_ACCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    secret_key: str = Field(min_length=1, description="Key used to sign bearer tokens")
    jwt_algorithm: str = "HS256"
    token_expire_minutes: int = Field(default=60, gt=0)

    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    database_url: str = "sqlite:///./user_accounts.db"

    # When enabled, a token may only update or delete the user it was issued for.
    enforce_subject_match: bool = False

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """
    Return the cached settings instance. Call ``get_settings.cache_clear()``
    to reload from the environment.
    """
    return Settings()
