# app/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str = "mongodb://localhost:27017/go"
    MONGODB_DB_NAME: str = "go"
    MONGODB_CONNECT_TIMEOUT_MS: int = 30000

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    RELOAD: bool = False

    # API settings
    API_PREFIX: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
