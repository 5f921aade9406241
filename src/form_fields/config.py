from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_BATCH = 64
DEFAULT_HTTP_LOG_BODY_MAX_BYTES = 4096


def _env_bool(name: str, default: bool = False) -> bool:
    v = (os.getenv(name) or "").strip().lower()
    if not v:
        return default
    return v in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    strict_types: bool = False
    max_batch: int = DEFAULT_MAX_BATCH
    http_log: bool = False
    http_log_headers: bool = False
    http_log_body_max_bytes: int = DEFAULT_HTTP_LOG_BODY_MAX_BYTES


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Called per use rather than cached at import time so `.env` files loaded by
    the app factory (and env overrides in tests) are always honored.
    """
    return Settings(
        log_level=_env_str("FORM_FIELDS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        strict_types=_env_bool("FORM_FIELDS_STRICT_TYPES", default=False),
        max_batch=max(1, _env_int("FORM_FIELDS_MAX_BATCH", DEFAULT_MAX_BATCH)),
        http_log=_env_bool("FORM_FIELDS_HTTP_LOG", default=False),
        http_log_headers=_env_bool("FORM_FIELDS_HTTP_LOG_HEADERS", default=False),
        http_log_body_max_bytes=_env_int("FORM_FIELDS_HTTP_LOG_BODY_MAX_BYTES", DEFAULT_HTTP_LOG_BODY_MAX_BYTES),
    )


def configure_logging(settings: Settings | None = None) -> None:
    s = settings or load_settings()
    level = getattr(logging, s.log_level, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("form_fields").setLevel(level)


__all__ = ["Settings", "load_settings", "configure_logging"]
