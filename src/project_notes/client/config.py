from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FUNCTIONS_PATH = "/functions/v1"


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str  # Required - the client refuses to start without it
    api_key: str | None = None  # Sent as the `apikey` header when set
    access_token: str | None = None

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("NOTES_API_URL must be an http(s) URL")
        return v

    @property
    def functions_url(self) -> str:
        return self.api_url + FUNCTIONS_PATH


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()  # type: ignore[call-arg]
