from functools import lru_cache
from typing import Literal, Self

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Project Notes API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Security
    log_user_emails: bool = False  # Keep False in production for GDPR compliance

    # Database
    database_url: str
    database_migrations_url: str | None = None  # Owner role for Alembic, if different
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full

    # Auth (token issuance lives in the identity service; we only verify)
    auth_verifier: Literal["jwt", "remote"] = "jwt"
    auth_jwt_secret: str | None = None
    auth_jwt_algorithm: str = "HS256"
    auth_jwt_audience: str | None = "authenticated"  # Empty string disables the aud check
    auth_url: str | None = None  # e.g. "https://<project>.supabase.co/auth/v1"
    auth_api_key: str | None = None

    # Functions
    functions_prefix: str = "/functions/v1"

    # CORS
    cors_allow_origin: str = "*"
    cors_allow_headers: str = "authorization, x-client-info, apikey, content-type"

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("auth_jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v: str | None) -> str | None:
        if v is not None and len(v) < 32:
            raise ValueError("AUTH_JWT_SECRET must be at least 32 characters")
        return v

    @field_validator("functions_prefix")
    @classmethod
    def validate_functions_prefix(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("FUNCTIONS_PREFIX must start with '/'")
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_auth_backend(self) -> Self:
        """Fail at startup when the selected verifier has no configuration."""
        if self.auth_verifier == "jwt" and not self.auth_jwt_secret:
            raise ValueError("AUTH_JWT_SECRET is required when AUTH_VERIFIER=jwt")
        if self.auth_verifier == "remote" and not self.auth_url:
            raise ValueError("AUTH_URL is required when AUTH_VERIFIER=remote")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
