# confusable_guard/config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

DATA_DIR = Path(__file__).resolve().parent / "data"
UPSTREAM_URL = "https://www.unicode.org/Public/security/latest/confusables.txt"


class Settings(BaseSettings):
    # --- Mapping data ---
    CONFUSABLES_UPSTREAM_URL: str = Field(default=UPSTREAM_URL)
    CONFUSABLES_DATA_PATH: Optional[Path] = None  # bundled data/confusables.txt
    CONFUSABLES_AMENDMENTS_PATH: Optional[Path] = None  # bundled data/amendments.txt

    # --- Concurrency ---
    CONFUSABLES_THREAD_SAFE: bool = Field(default=False)

    # --- HTTP (build tooling only) ---
    HTTPX_TIMEOUT_S: int = Field(default=30, ge=1, le=300)

    # --- Logging ---
    LOG_JSON: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    model_config = {
        "extra": "ignore",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @property
    def data_path(self) -> Path:
        return self.CONFUSABLES_DATA_PATH or DATA_DIR / "confusables.txt"

    @property
    def amendments_path(self) -> Path:
        return self.CONFUSABLES_AMENDMENTS_PATH or DATA_DIR / "amendments.txt"


def get_settings() -> Settings:
    return Settings()
