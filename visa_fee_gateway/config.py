"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Rate schedule store
    schedule_source_url: str = "https://occupation-search-default-rtdb.firebaseio.com/visas/.json"
    load_schedule_on_startup: bool = False

    # Service
    service_name: str = "visa-fee-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
