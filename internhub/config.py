"""
Application settings loaded from .env file.

Uses pydantic-settings to validate and type-check all environment variables.
Every field can be overridden by an environment variable of the same name.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Where the key/value collection store lives (any SQLAlchemy URL)
    DATABASE_URL: str = "sqlite:///./internhub.db"

    # Remote auth backend (login, register, user admin)
    AUTH_API_URL: str = "http://localhost:5000/api"

    # Scraping services that turn a hackathon/internship URL into fields
    EXTRACTION_API_URL: str = "http://localhost:5000/api"

    # Seconds before any remote call is abandoned
    HTTP_TIMEOUT: float = 30.0

    # Write the default datasets on first start
    SEED_ON_STARTUP: bool = True

    # "console" for local development, "json" for log shipping
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    class Config:
        env_file = ".env"


# Single global instance - import this wherever you need settings
settings = Settings()
