from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "Order Ledger API"
    api_prefix: str = "/api"
    database_url: str = Field(
        default="sqlite:///./order_ledger.db",
        validation_alias=AliasChoices("DB__CONN", "database_url"),
        description="SQLAlchemy compatible database URL",
    )
    echo_sql: bool = Field(default=False, validation_alias=AliasChoices("DB__ECHO", "echo_sql"))
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    enable_seed_data: bool = Field(
        default=False, validation_alias=AliasChoices("APP__SEED_DATA", "enable_seed_data")
    )
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "info"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
