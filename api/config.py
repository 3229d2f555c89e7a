"""Environment-driven settings for the event finder API."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEV_CORS_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]
# Hosted front ends and their preview deployments
PROD_CORS_ORIGIN_REGEX = r"https://.*\.(onrender\.com|vercel\.app)"
DEFAULT_FRONTEND_URL = "https://mini-event-finder.vercel.app"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> Optional[List[str]]:
    value = os.getenv(name)
    if not value:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime configuration; see ``from_env`` for the variable names."""

    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    frontend_url: str = DEFAULT_FRONTEND_URL
    cors_origins: List[str] = field(default_factory=lambda: list(DEV_CORS_ORIGINS))
    cors_origin_regex: Optional[str] = None
    seed_on_startup: bool = True
    seed_events_path: Optional[str] = None
    log_level: str = "INFO"
    version: str = "1.0.0"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        environment = os.getenv("APP_ENV", "development").strip().lower()
        frontend_url = os.getenv("FRONTEND_URL", DEFAULT_FRONTEND_URL)

        origins = _env_list("CORS_ORIGINS")
        origin_regex = None
        if origins is None:
            if environment == "production":
                origins = [frontend_url]
                origin_regex = PROD_CORS_ORIGIN_REGEX
            else:
                origins = list(DEV_CORS_ORIGINS)

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if os.getenv("EVENT_FINDER_DEBUG"):
            log_level = "DEBUG"

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            environment=environment,
            frontend_url=frontend_url,
            cors_origins=origins,
            cors_origin_regex=origin_regex,
            seed_on_startup=_env_bool("SEED_ON_STARTUP", True),
            seed_events_path=os.getenv("SEED_EVENTS_PATH") or None,
            log_level=log_level,
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
