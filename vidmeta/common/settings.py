# vidmeta/common/settings.py
from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vidmeta.common.strings.splitters import csv_to_list


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
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class FFProbeConfig(BaseModel):
    bin: str = "ffprobe"
    timeout_sec: int = Field(30, ge=1)
    log_level: str = "quiet"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace


class FetchConfig(BaseModel):
    timeout_sec: float = Field(30.0, gt=0)
    max_redirects: int = Field(10, ge=0)
    chunk_size: int = Field(1024 * 1024, ge=1024)
    user_agent: str = "vidmeta/0.1"


class PipelineDefaults(BaseModel):
    binary_property: str = "data"
    output_property: str = "metadata"
    url_property: str = "url"
    default_extension: str = ".mp4"
    continue_on_fail: bool = False

    @field_validator("continue_on_fail", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @field_validator("default_extension")
    @classmethod
    def _dotted(cls, v: str) -> str:
        v = v.strip()
        return v if not v or v.startswith(".") else f".{v}"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "vidmeta"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Scratch files --------
    scratch_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()) / "vidmeta")

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()
    fetch: FetchConfig = FetchConfig()
    pipeline: PipelineDefaults = PipelineDefaults()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.app_env.lower() in ("development", "test")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from vidmeta.common.settings import get_settings
        cfg = get_settings()
    """
    s = Settings()  # pydantic_settings will read from .env automatically
    if s.is_dev:
        s.scratch_dir.mkdir(parents=True, exist_ok=True)
    return s
