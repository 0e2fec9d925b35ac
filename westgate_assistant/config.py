"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./westgate.db"

    # Service
    service_name: str = "westgate-assistant"
    log_level: str = "INFO"

    # Chat
    chat_history_limit: int = 200  # Max messages returned for one session


settings = Settings()
