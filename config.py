"""Process-wide settings read from the environment and `.env`."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Immutable runtime configuration, built once at startup.

    Each field is read from the upper-cased environment variable of the
    same name (GEMINI_API_KEY, LLM_TIMEOUT, ...).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    gemini_api_key: Optional[str] = Field(
        default=None, description="Credential for the Gemini API"
    )
    gemini_model: str = Field(default="gemini-2.5-flash")
    gemini_temperature: float = Field(default=0.7)
    gemini_max_tokens: int = Field(default=2000, gt=0)
    llm_timeout: float = Field(
        default=120.0, gt=0, description="Upper bound in seconds for one LLM call"
    )
    extraction_timeout: float = Field(
        default=60.0, gt=0, description="Upper bound in seconds for one extraction"
    )
    ocr_language: str = Field(default="eng")
    port: int = Field(default=4000)
    log_level: str = Field(default="DEBUG")

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def empty_key_is_unset(cls, value):
        return value or None

    @field_validator("log_level", mode="before")
    @classmethod
    def known_log_level(cls, value):
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
