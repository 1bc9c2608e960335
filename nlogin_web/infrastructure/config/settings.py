"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from NLOGIN_* environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.database_url)
        print(settings.hashing_algorithm)
    """

    # Database (the nLogin plugin's MySQL/MariaDB schema)
    db_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL. Overrides the db_* connection fields when set.",
    )
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=3306)
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="nlogin")
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    db_pool_timeout: int = Field(default=10)

    # Identity resolution
    strict_name_uniqueness: bool = Field(
        default=False,
        description="Set when nLogin's 'username-appender' option is enabled. "
        "Display-name lookups then only match accounts without a platform identity.",
    )

    # Hashing
    hashing_algorithm: Literal["bcrypt", "sha256", "sha512", "authme"] = Field(
        default="bcrypt",
        description="Algorithm used for every newly written hash.",
    )
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    model_config = SettingsConfigDict(
        env_prefix="NLOGIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """Build the MySQL URL (PyMySQL driver) unless db_url overrides it."""
        if self.db_url:
            return self.db_url
        return f"mysql+pymysql://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
