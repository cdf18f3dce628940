# app/core/config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "E-Comm API"

    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DB: str = "ecomm"

    JWT_SECRET_KEY: str = "e-comm"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 120

    # Bootstrap admin, created once on startup
    ADMIN_NAME: str = "Admin"
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: str = "jkl@123"

    UPLOAD_DIR: str = "uploads"
    CORS_ORIGINS: List[str] = ["*"]

    HOST: str = "0.0.0.0"
    PORT: int = 5000


settings = Settings()
