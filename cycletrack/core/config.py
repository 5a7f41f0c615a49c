from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://cycletrack_user:cycletrack_password@db:5432/cycletrack_db"
    DB_ECHO: bool = False
    # Пересоздавать таблицы на каждом старте только в локальной разработке
    RESET_DATABASE: bool = False
    SECRET_KEY: str = "SECRET_KEY_FOR_CYCLETRACK"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 30
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


settings = Settings()
