"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "InternLink"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # JWT Auth (safe defaults for local development)
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Match score store
    # memory: dict keyed by (student_id, job_id), lost on restart
    # sql: skill_match_scores table reached through SQLAlchemy
    match_store_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///./internlink.db"

    # Matching
    default_match_limit: int = 10

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
