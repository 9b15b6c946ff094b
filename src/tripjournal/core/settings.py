from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TokenSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRIPJOURNAL_TOKEN_")

    ttl_seconds: int = Field(default=3600, gt=0)
    path: Path | None = Field(default=None)
    access_token_key: str = Field(default="accessToken")
    retrieval_time_key: str = Field(default="tokenRetrievalTime")


class JournalSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TRIPJOURNAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(default="http://127.0.0.1:8000/")
    timeout_seconds: float | None = Field(default=None)

    token: TokenSettings = Field(default_factory=TokenSettings)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL is a non-empty string."""
        if not v or not v.strip():
            msg = "base_url must be a non-empty string"
            raise ValueError(msg)
        return v.strip()
