from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(str, Enum):
    DEV = "dev"
    HML = "hml"
    PROD = "prod"


class Settings(BaseSettings):
    APP_ENV: Env = Env.DEV
    DEBUG: bool = False

    DATABASE_URL: str = "sqlite:///./students.db"

    # bcrypt cost factor; read at hashing time, not at import
    BCRYPT_SALT_ROUNDS: int = Field(12, ge=4, le=31)

    # comma-separated; empty means any origin
    ALLOWED_HOSTS: str = ""

    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# cria instância global
settings = Settings()
