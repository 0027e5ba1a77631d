# -*- coding: utf-8 -*-
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class VConfig(BaseSettings):
    """Ambient adapter configuration loaded from env / .env.

    The API key is deliberately absent: it is looked up when request headers are built.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ---------- Logging ----------
    log_level: str = Field("INFO", validation_alias="VOLCENGINE_LOG_LEVEL")
    log_requests: bool = Field(False, validation_alias="VOLCENGINE_LOG_REQUESTS")

    # ---------- HTTP ----------
    timeout_seconds: int = Field(60, validation_alias="VOLCENGINE_TIMEOUT_SECONDS", ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        # "" -> "INFO"
        if v is None:
            return "INFO"
        if isinstance(v, str) and not v.strip():
            return "INFO"
        return str(v).upper().strip()


@lru_cache(maxsize=1)
def get_config() -> VConfig:
    return VConfig()
