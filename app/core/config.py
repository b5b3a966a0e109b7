"""
Application configuration
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "wemake"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DB_USERNAME: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "wemake"
    DATABASE_URL_OVERRIDE: Optional[str] = None  # full URL, wins over the DB_* parts

    # JWT
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    LOGIN_URL: str = "/auth/login"

    # CORS
    CORS_ORIGINS: list = ["*"]

    # Listings
    PAGE_SIZE: int = 7
    DEFAULT_LIST_LIMIT: int = 20
    TIMEZONE: str = "Asia/Seoul"  # calendar used for leaderboard windows

    @property
    def DATABASE_URL(self) -> str:
        """Database connection URL"""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+asyncpg://{self.DB_USERNAME}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
