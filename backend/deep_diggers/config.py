"""Runtime settings read from the environment (optionally via a .env file)."""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///deep_diggers.sqlite3"


def _get_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _get_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("[config] %s=%r is not an integer; using %d", name, raw, default)
        return default


def _get_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGIN", "").strip()
    if not raw:
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    code_length: int = 4
    map_width: int = 32
    map_height: int = 32
    host: str = "0.0.0.0"
    port: int = 8000


def get_settings() -> Settings:
    return Settings(
        database_url=_get_str("DEEPDIG_DATABASE_URL", DEFAULT_DATABASE_URL),
        cors_origins=_get_origins(),
        code_length=_get_int("DEEPDIG_CODE_LENGTH", 4),
        map_width=_get_int("DEEPDIG_MAP_WIDTH", 32),
        map_height=_get_int("DEEPDIG_MAP_HEIGHT", 32),
        host=_get_str("DEEPDIG_HOST", "0.0.0.0"),
        port=_get_int("DEEPDIG_PORT", 8000),
    )
