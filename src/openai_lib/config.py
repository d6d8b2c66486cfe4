"""Configuration management - environment and .env."""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from openai_lib.models import Model

DEFAULT_BASE_URL = "https://api.openai.com/v1"


class Settings(BaseSettings):
    """Library settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_api_key: SecretStr = Field(default=SecretStr(""), description="API key for the provider")
    openai_model: Model = Field(default=Model.GPT_35_TURBO, description="Default chat model")
    openai_base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
