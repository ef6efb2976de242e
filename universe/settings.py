from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPARKY_BASE_CONVERT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    int_bits: int = Field(
        default=64,
        ge=8,
        le=128,
        description="Width of the unsigned integer that bounds every magnitude.",
    )
    log_level: str = Field(default="WARNING")
    log_json: bool = Field(default=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        if v is None:
            return "WARNING"
        return str(v).strip().upper() or "WARNING"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
