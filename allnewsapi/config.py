from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.allnewsapi.com"


class Settings(BaseSettings):

    api_key: Optional[str] = Field(default=None, description="AllNewsAPI key")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="AllNewsAPI base URL")

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    model_config = SettingsConfigDict(
        env_prefix="ALLNEWSAPI_",
        env_file=[".env", ".env.local"],  # .env.local takes precedence over .env
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
