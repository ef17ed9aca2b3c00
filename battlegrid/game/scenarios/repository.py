"""Persistence layer for loading/saving scenarios."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ScenarioRepository:
    """JSON file repository of scenarios, keyed by the payload ``name``."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def list_names(self) -> list[str]:
        """List stored scenario names."""
        names = [self._read_name(path) or path.stem for path in self._root.glob("*.json")]
        return sorted(names, key=str.lower)

    def load_payload(self, name: str) -> dict[str, object]:
        """Load a scenario payload by name."""
        path = self._find(name)
        if path is None:
            raise FileNotFoundError(f"Scenario '{name}' not found.")
        return read_payload(path)

    def save_payload(self, name: str, payload: dict[str, object]) -> Path:
        """Save a scenario payload, replacing any scenario with the same name."""
        cleaned = _validate_name(name)
        path = self._find(cleaned) or self._allocate_path(cleaned)
        with path.open("w", encoding="utf-8") as handle:
            json.dump({**payload, "name": cleaned}, handle, indent=2)
        logger.debug("scenario_saved name=%s path=%s", cleaned, path)
        return path

    def delete(self, name: str) -> None:
        """Delete a scenario by name if it exists."""
        path = self._find(name)
        if path is not None:
            path.unlink()

    def rename(self, old_name: str, new_name: str) -> None:
        """Rename a stored scenario."""
        new_clean = _validate_name(new_name)
        old_path = self._find(old_name)
        if old_path is None:
            raise FileNotFoundError(f"Scenario '{old_name}' not found.")
        existing = self._find(new_clean)
        if existing is not None and existing != old_path:
            raise ValueError(f"Scenario '{new_name}' already exists.")
        payload = read_payload(old_path)
        payload["name"] = new_clean
        with old_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)

    def _find(self, name: str) -> Path | None:
        cleaned = _validate_name(name)
        direct = self._root / f"{_filename_stem(cleaned)}.json"
        if direct.exists() and self._read_name(direct) in {cleaned, None}:
            return direct
        for path in sorted(self._root.glob("*.json")):
            if self._read_name(path) == cleaned:
                return path
        return None

    def _allocate_path(self, name: str) -> Path:
        stem = _filename_stem(name)
        candidate = self._root / f"{stem}.json"
        suffix = 2
        while candidate.exists():
            candidate = self._root / f"{stem}_{suffix}.json"
            suffix += 1
        return candidate

    @staticmethod
    def _read_name(path: Path) -> str | None:
        try:
            payload = read_payload(path)
        except (OSError, ValueError):
            return None
        value = payload.get("name")
        if isinstance(value, str):
            return value.strip() or None
        return None


def read_payload(path: Path) -> dict[str, object]:
    """Read a scenario payload from an arbitrary JSON file."""
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"Scenario file '{path}' must contain a JSON object.")
    return payload


def _validate_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Scenario name cannot be empty.")
    return cleaned


def _filename_stem(name: str) -> str:
    chars = [char if char.isalnum() or char in {"-", "_"} else "_" for char in name]
    return "".join(chars).strip("_") or "scenario"
