"""Environment-driven settings. Read after .env has been loaded."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_DELETE_DELAY_SECONDS = 3.0
DEFAULT_PORT = 3000


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number, using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("%s=%r is negative, using %s", name, raw, default)
        return default
    return value


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    delete_delay_seconds: float
    static_dir: Path
    log_level: str
    host: str
    port: int


def load_settings() -> Settings:
    static_dir = os.environ.get("CONTACTBOOK_STATIC_DIR", "").strip()
    return Settings(
        delete_delay_seconds=_float_env(
            "CONTACTBOOK_DELETE_DELAY_SECONDS", DEFAULT_DELETE_DELAY_SECONDS
        ),
        static_dir=Path(static_dir) if static_dir else REPO_ROOT,
        log_level=os.environ.get("CONTACTBOOK_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        host=os.environ.get("CONTACTBOOK_HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_int_env("CONTACTBOOK_PORT", DEFAULT_PORT),
    )
