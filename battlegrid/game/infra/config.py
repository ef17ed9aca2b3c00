"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env",
    "appdata/config/.env.local",
    ".env",
    ".env.local",
)


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Immutable runtime settings resolved from environment."""

    log_level: str
    log_format: str
    render_style: str


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files win when overriding."""
    for path in DEFAULT_ENV_FILES if paths is None else tuple(paths):
        load_env_file(path, override_existing=override_existing)


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with app-prefixed override."""
    value = os.getenv("BATTLEGRID_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_settings() -> AppSettings:
    """Load immutable settings from env vars."""
    return AppSettings(
        log_level=resolve_log_level_name(),
        log_format=os.getenv("LOG_FORMAT", "text").strip().lower() or "text",
        render_style=os.getenv("BATTLEGRID_RENDER_STYLE", "numeric").strip().lower() or "numeric",
    )


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    # Fallback for run configs with a different working directory.
    return Path(__file__).resolve().parents[3] / path
