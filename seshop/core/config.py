from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (SQLAlchemy URL, e.g. postgresql+psycopg://... or sqlite:///./shop.db)
      - JWT_SECRET (secret used to verify bearer tokens)

    Optional:
      - CLIENT_URL (frontend origin allowed by CORS)
    """

    PROJECT_NAME: str = "SE Shop API"
    DOCS_URL: str = "/api-docs"

    # Database
    DATABASE_URL: str
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5

    # JWT verification
    JWT_SECRET: str
    JWT_ALG: str = "HS256"

    # Frontend origin for CORS
    CLIENT_URL: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
