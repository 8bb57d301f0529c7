"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

REMOVE_BG_ENDPOINT = "https://api.remove.bg/v1.0/removebg"
REMOVE_BG_ACCOUNT_URL = "https://api.remove.bg/v1.0/account"


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    remove_bg_api_key: str = ""
    remove_bg_endpoint: str = REMOVE_BG_ENDPOINT
    remove_bg_account_url: str = REMOVE_BG_ACCOUNT_URL
    request_timeout: float = 60.0


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        remove_bg_api_key=os.getenv("REMOVE_BG_API_KEY", ""),
        remove_bg_endpoint=os.getenv("REMOVE_BG_ENDPOINT", REMOVE_BG_ENDPOINT),
        remove_bg_account_url=os.getenv("REMOVE_BG_ACCOUNT_URL", REMOVE_BG_ACCOUNT_URL),
        request_timeout=float(os.getenv("REMOVE_BG_TIMEOUT", "60")),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
