"""Application settings using Pydantic Settings for typed configuration.

Both the API and the operator tools read their configuration from here.
Values come from environment variables (and a local `.env` file).
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")

    # Database
    database_url: str = Field(alias="DATABASE_URL")
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")

    # Sessions (API login + admin panel)
    session_secret_key: str = Field(
        default="equinox-dashboard-secret-change-in-production",
        alias="SESSION_SECRET_KEY",
    )
    session_max_age_hours: int = Field(
        default=24, alias="SESSION_MAX_AGE_HOURS", ge=1, le=24 * 14
    )

    # CORS
    cors_origins: str = Field(default="http://localhost:5173", alias="CORS_ORIGINS")
    cors_origin_regex: str | None = Field(
        default=r"https://.*\.vercel\.app", alias="CORS_ORIGIN_REGEX"
    )

    # Passwords
    bcrypt_rounds: int = Field(default=10, alias="BCRYPT_ROUNDS", ge=4, le=31)

    # Operator tools
    ops_admin_email: str = Field(default="ai@admin.com", alias="OPS_ADMIN_EMAIL")
    ops_admin_password: str = Field(default="password123", alias="OPS_ADMIN_PASSWORD")
    ops_reset_password: str = Field(default="123456", alias="OPS_RESET_PASSWORD")
    ops_seed_password: str = Field(default="password123", alias="OPS_SEED_PASSWORD")
    session_sql_path: Path | None = Field(default=None, alias="SESSION_SQL_PATH")

    @field_validator("database_url")
    @classmethod
    def use_psycopg_driver(cls, value: str) -> str:
        """Plain ``postgres(ql)://`` URLs get the installed psycopg 3 driver."""
        for scheme in ("postgres://", "postgresql://"):
            if value.startswith(scheme):
                return "postgresql+psycopg://" + value[len(scheme) :]
        return value

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @computed_field
    @property
    def is_secure_cookie(self) -> bool:
        """Determine if cookies should be set with Secure flag."""
        return self.env_name.lower() not in {"dev", "development", "local", "test"}

    @computed_field
    @property
    def session_max_age(self) -> int:
        """Session cookie lifetime in seconds."""
        return self.session_max_age_hours * 60 * 60


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
