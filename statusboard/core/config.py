from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    status_path: Path = DATA_DIR / "status.json"
    issues_path: Path = DATA_DIR / "issues.json"
    page_title: str = "Pathverse Service Status"
    sample_interval_min: int = Field(default=30, gt=0)
    sample_policy: Literal["reject", "clamp"] = "reject"
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"

    # ENV-only configuration
    model_config = SettingsConfigDict(env_prefix="STATUSBOARD_")


settings = Settings()
