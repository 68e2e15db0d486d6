from __future__ import annotations

from typing import Literal

from pydantic import AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    SUPABASE_URL: AnyUrl
    SUPABASE_SERVICE_ROLE_KEY: str
    APP_ENV: str = "local"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    FRONTEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: ["http://localhost:8081", "http://localhost:19006"],
    )

    RECIPES_TABLE: str = "recipes"
    DEFAULT_LANGUAGE: Literal["en", "am"] = "en"

    TRANSLATION_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
    MYMEMORY_API_URL: str = "https://api.mymemory.translated.net/get"
    GOOGLE_TRANSLATE_URL: str = "https://translate.googleapis.com/translate_a/single"


settings = Settings()
