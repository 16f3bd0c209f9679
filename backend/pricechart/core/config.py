# backend/pricechart/core/config.py
from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

# Resolves to <repo-root>/backend/.env when this file is at backend/pricechart/core/config.py
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ENV: str = "development"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = []
    ALLOWED_ORIGINS: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = str(Path(__file__).resolve().parents[2] / "logs")
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = False

    # Upstream CSV provider
    STOOQ_CSV_URL: str = "https://stooq.com/q/d/l/"
    UPSTREAM_TIMEOUT_SECONDS: Optional[float] = None   # None = transport default

    # Price history defaults
    DEFAULT_INTERVAL: str = "d"
    DEFAULT_DAYS: int = 180

    # Chart viewport defaults
    CHART_WIDTH: int = 1800
    CHART_HEIGHT: int = 420

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors(cls, v):
        if isinstance(v, list):
            return v
        raw = v or os.getenv("ALLOWED_ORIGINS", "")
        return [o.strip() for o in str(raw).split(",") if o.strip()]

    @field_validator("RELOAD", mode="before")
    @classmethod
    def _parse_reload_bool(cls, v):
        if isinstance(v, bool):
            return v
        return str(v).lower() in ("1", "true", "yes", "on")

    @field_validator("DEFAULT_INTERVAL")
    @classmethod
    def _validate_interval(cls, v):
        v = str(v).strip().lower()
        if v not in ("d", "w", "m"):
            raise ValueError("DEFAULT_INTERVAL must be one of d, w, m")
        return v

    @field_validator("UPSTREAM_TIMEOUT_SECONDS", mode="before")
    @classmethod
    def _parse_timeout(cls, v):
        if v is None or str(v).strip() == "":
            return None
        return v

    @field_validator("DEFAULT_DAYS", "CHART_WIDTH", "CHART_HEIGHT")
    @classmethod
    def _validate_positive(cls, v):
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

settings = Settings()
