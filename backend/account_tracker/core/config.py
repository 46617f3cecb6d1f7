from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Account Status Tracker"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Storage
    DATA_FILE: str = "tracker_data.json"

    # Frontend page served at / and /index.html
    INDEX_HTML: str = "index.html"

    # Timezone used to decide which week "today" falls in
    TIMEZONE: str = "UTC"

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
