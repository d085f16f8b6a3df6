from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from datetime import datetime

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Finance Tracker API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    DATABASE_URL: str = f"sqlite+aiosqlite:///{BASE_DIR}/data/finance.db"

    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Tokens are issued by the hosted auth provider and signed with its JWT secret
    JWT_SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str = "authenticated"

    LOCALE: str = "es"
    LOG_LEVEL: str = "INFO"
    SEED_GLOBAL_CATEGORIES: bool = True

    MOCK_NOW: Optional[datetime] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

settings = Settings()
