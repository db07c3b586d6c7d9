from pydantic_settings import BaseSettings
from typing import List
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./organizer.db")
    DB_ECHO: bool = False

    # Project settings
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Organizer")
    API_V1_STR: str = "/api/v1"
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"
        # Unknown keys in .env are ignored instead of rejected.
        extra = "ignore"


settings = Settings()
