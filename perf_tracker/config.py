"""Configuration primitives for the timing registry."""

from __future__ import annotations

from dataclasses import dataclass
import os

from .resolution import Resolution


def _env_flag(name: str, *, default: bool) -> bool:
    """Interpret common truthy/falsey environment values."""

    value = os.environ.get(name)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    """Runtime configuration defaults for new registries and reports."""

    table_width: int = int(os.environ.get("PERF_TRACKER_TABLE_WIDTH", "75"))
    default_resolution: Resolution = Resolution.parse(
        os.environ.get("PERF_TRACKER_DEFAULT_RESOLUTION", "ms")
    )
    allow_repeat_end: bool = _env_flag("PERF_TRACKER_ALLOW_REPEAT_END", default=False)
    use_locale: bool = _env_flag("PERF_TRACKER_USE_LOCALE", default=False)
    log_level: str = os.environ.get("PERF_TRACKER_LOG_LEVEL", "WARNING").upper()


settings = Settings()
