from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_api.domain.services.pagination import DEFAULT_PAGE_SIZE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: Optional[str] = None
    USE_ONLY_IN_MEMORY_DATABASE: bool = False
    SEED_DATABASE: bool = True

    CATALOG_BASE_URL: str = "http://localhost:5106"
    DEFAULT_PAGE_SIZE: int = DEFAULT_PAGE_SIZE
