"""Module: config."""

from pydantic_settings import BaseSettings

# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # SQLAlchemy connection string; point at PostgreSQL in deployed environments.
    database_url: str = "sqlite:///./adocao.db"
    # HTTP listener.
    host: str = "0.0.0.0"
    port: int = 3000
    # Common root every resource router is mounted under.
    api_prefix: str = "/api"
    log_level: str = "INFO"
    # Front-end origins allowed by the CORS middleware.
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"

# Global settings instance imported by app modules at runtime.
settings = Settings()
