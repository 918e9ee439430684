from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_STATIC_DIR = PROJECT_ROOT / "static"


class Settings(BaseModel):
    """Runtime configuration resolved from environment variables."""

    gemini_api_key: Optional[str] = Field(
        default=None, alias="GEMINI_API_KEY", description="Google Gemini API key"
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash",
        alias="GEMINI_MODEL",
        description="Generative model used to answer chat messages.",
    )
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GEMINI_API_BASE",
        description="Root URL of the generative language REST API.",
    )
    gemini_timeout_seconds: Optional[float] = Field(
        default=None,
        alias="GEMINI_TIMEOUT_SECONDS",
        description="Optional timeout for each upstream call; unset means no timeout.",
    )
    host: str = Field(default="0.0.0.0", alias="HOST", description="Bind address")
    port: int = Field(default=8080, alias="PORT", description="Bind port")
    log_level: str = Field(
        default="INFO", alias="LOG_LEVEL", description="Root logging level."
    )
    service_name: str = Field(
        default="cybersecurity-chatbot",
        alias="SERVICE_NAME",
        description="Service name reported by the health endpoint.",
    )
    static_dir: Path = Field(
        default=DEFAULT_STATIC_DIR,
        alias="STATIC_DIR",
        description="Directory holding widget.js and other static assets.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def widget_path(self) -> Path:
        return self.static_dir / "widget.js"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(os.environ)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from environment variables."""
    return Settings.from_env()
