from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Tasador"
    environment: str = "dev"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: str = "*"

    raw_catalog_path: str = "cars.json"
    catalog_path: str = "processedCars.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
