from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core import SOURCE_URL
from .extractor import MAX_NEWS_ITEMS, SITE_ORIGIN

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CORRIERE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    source_url: str = Field(default=SOURCE_URL, description="Homepage to scrape")
    site_origin: str = Field(default=SITE_ORIGIN, description="Prefix for site-relative links")
    max_items: int = Field(default=MAX_NEWS_ITEMS, ge=1, le=MAX_NEWS_ITEMS, description="Items per response")
    request_timeout: float = Field(default=10.0, gt=0, description="Fetch timeout in seconds")

    host: str = Field(default="127.0.0.1", description="API host")
    port: int = Field(default=3000, description="API port")
    cors_origins: List[str] = Field(default=["http://localhost:3000"], description="Allowed CORS origins")
    static_dir: str = Field(default="public", description="Frontend build served at /")

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="console or json")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
