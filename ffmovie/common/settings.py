# ffmovie/common/settings.py
from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ffmovie.common.strings import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class FrameConfig(BaseModel):
    image_format: str = Field("jpg", pattern="^(jpg|jpeg|png|bmp)$")
    name_prefix: str = "frame"
    slug_length: int = Field(13, ge=6, le=64)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "ffmovie"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- External tools --------
    ffmpeg_bin: str = "/usr/local/bin/ffmpeg"
    ffprobe_bin: str = "ffprobe"
    # Default for providers built by Movie when the caller passes none
    persistent_output: bool = False

    # -------- Paths --------
    media_root: Path = Path("/media/ffmovie")
    temp_root: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()) / "ffmovie")

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    frames: FrameConfig = FrameConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("persistent_output", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from ffmovie.common.settings import get_settings
        cfg = get_settings()
    """
    s = Settings()  # pydantic_settings will read from .env automatically
    if s.app_env in ("development", "test"):
        s.temp_root.mkdir(parents=True, exist_ok=True)
    return s
