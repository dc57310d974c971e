import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

DEFAULT_FORWARD_TIMEOUT = 5.0


@dataclass
class Settings:
    cors_origins: list[str]
    log_level: str
    ingest_url: str
    ingest_sensor_id: str
    forward_timeout: float

    @property
    def forwarding_enabled(self) -> bool:
        return bool(self.ingest_url and self.ingest_sensor_id)


def _split_origins(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [o.strip() for o in raw.split(",") if o.strip()]


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value > 0:
        return value
    logger.warning("Invalid %s=%r, using %s", name, raw, default)
    return default


def load_settings() -> Settings:
    """Load service settings from the environment with sensible defaults."""

    return Settings(
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "http://localhost:5173")),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        ingest_url=os.getenv("INGEST_URL", "").strip(),
        ingest_sensor_id=os.getenv("INGEST_SENSOR_ID", "").strip(),
        forward_timeout=_env_float("FORWARD_TIMEOUT", DEFAULT_FORWARD_TIMEOUT),
    )
