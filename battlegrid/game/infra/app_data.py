"""Unified battlegrid app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_project_root() -> Path:
    """Resolve the directory holding the ``battlegrid`` package."""
    return Path(__file__).resolve().parents[3]


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory."""
    configured = os.getenv("BATTLEGRID_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_project_root() / candidate
    return resolve_project_root() / "appdata"


def resolve_logs_dir() -> Path:
    """Resolve logs directory, honoring ``BATTLEGRID_LOG_DIR``."""
    return _resolve_subdir("BATTLEGRID_LOG_DIR", "logs")


def resolve_scenarios_dir() -> Path:
    """Resolve scenarios directory, honoring ``BATTLEGRID_SCENARIOS_DIR``."""
    return _resolve_subdir("BATTLEGRID_SCENARIOS_DIR", "scenarios")


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    paths = {
        "root": resolve_app_data_root(),
        "logs": resolve_logs_dir(),
        "scenarios": resolve_scenarios_dir(),
    }
    for path in paths.values():
        path.mkdir(parents=True, exist_ok=True)
    return paths


def _resolve_subdir(var_name: str, default_name: str) -> Path:
    raw = os.getenv(var_name, "").strip()
    if not raw:
        return resolve_app_data_root() / default_name
    candidate = Path(raw)
    if candidate.is_absolute():
        return candidate
    return resolve_app_data_root() / candidate
