"""Configuration for the tea timer."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from tea_timer.core.errors import ConfigError

APP_NAME = "Tea Time(r)"
READY_MESSAGE = "Your tea is ready! Enjoy :)"
DEFAULT_NOTIFY_TIMEOUT_MS = 3000


def _coerce_int(field: str, value: object, default: int) -> int:
    """Parse integer configuration values with helpful errors."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid integer for {field}: {value!r}") from exc


def _coerce_log_level(field: str, value: str | None, default: str) -> str:
    level = (value or default).strip().upper()
    try:
        logger.level(level)
    except ValueError as exc:
        raise ConfigError(f"Invalid log level for {field}: {value!r}") from exc
    return level


def _coerce_bool(field: str, value: object, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    raise ConfigError(f"Invalid boolean for {field}: {value!r}")


@dataclass(frozen=True)
class TimerConfig:
    """Resolved settings for a single timer run."""

    tea: str | None = None
    duration: str | None = None
    list_teas: bool = False
    file_path: Path | None = None
    notify: bool = True
    notify_timeout_ms: int = DEFAULT_NOTIFY_TIMEOUT_MS
    log_level: str = "WARNING"


def load_config(
    *,
    tea: str | None = None,
    duration: str | None = None,
    list_teas: bool = False,
    file_path: str | Path | None = None,
    notify_override: bool | None = None,
) -> TimerConfig:
    """Merge CLI values over environment variables (and a .env file, if present)."""

    load_dotenv()

    file_value = file_path or os.getenv("TEA_TIMER_FILE") or None
    notify = _coerce_bool(
        "TEA_TIMER_NOTIFY",
        notify_override if notify_override is not None else os.getenv("TEA_TIMER_NOTIFY"),
        True,
    )
    timeout = _coerce_int(
        "TEA_TIMER_NOTIFY_TIMEOUT",
        os.getenv("TEA_TIMER_NOTIFY_TIMEOUT"),
        DEFAULT_NOTIFY_TIMEOUT_MS,
    )
    if timeout < 0:
        raise ConfigError(f"Invalid notification timeout: {timeout}")

    return TimerConfig(
        tea=tea or None,
        duration=duration or None,
        list_teas=list_teas,
        file_path=Path(file_value) if file_value else None,
        notify=notify,
        notify_timeout_ms=timeout,
        log_level=_coerce_log_level("TEA_TIMER_LOG_LEVEL", os.getenv("TEA_TIMER_LOG_LEVEL"), "WARNING"),
    )
