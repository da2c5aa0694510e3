from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App
    env: str = Field(default="development", description="ENV")
    debug: bool = Field(default=False, description="DEBUG")

    # Paging defaults
    default_page_length: int = Field(default=10, ge=0, alias="PAGE_LENGTH")
    max_page_length: int = Field(default=200, ge=1, alias="MAX_PAGE_LENGTH")
    pagination_get_var: str = Field(default="start", min_length=1, alias="PAGINATION_GET_VAR")
    summary_context: int = Field(default=4, ge=0, alias="SUMMARY_CONTEXT")

    # Demo data: registers a "numbers" collection 1..n at startup when > 0
    demo_collection_size: int = Field(default=0, ge=0, alias="DEMO_COLLECTION_SIZE")


@lru_cache
def get_settings() -> Settings:
    return Settings()
