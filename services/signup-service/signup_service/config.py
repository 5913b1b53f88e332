from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Runtime configuration values exposed to FastAPI components."""

    app_name: str = os.getenv("APP_NAME", "signup-service")
    version: str = "0.1.0"
    http_host: str = os.getenv("HTTP_HOST", "0.0.0.0")
    http_port: int = int(os.getenv("HTTP_PORT", "8000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    email_check_deliverability: bool = os.getenv("EMAIL_CHECK_DELIVERABILITY", "false").lower() in {
        "1",
        "true",
        "yes",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance for the running process."""
    return Settings()
