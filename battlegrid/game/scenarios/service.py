"""Scenario use cases: schema and placement validation over the repository."""

from __future__ import annotations

from pathlib import Path

from battlegrid.game.core.models import Scenario
from battlegrid.game.core.scenario import validate_scenario
from battlegrid.game.scenarios.repository import ScenarioRepository, read_payload
from battlegrid.game.scenarios.schema import payload_to_scenario, scenario_to_payload


class ScenarioService:
    """High-level scenario operations."""

    def __init__(self, repository: ScenarioRepository) -> None:
        self._repository = repository

    def list_scenarios(self) -> list[str]:
        """List stored scenario names."""
        return self._repository.list_names()

    def save_scenario(self, scenario: Scenario) -> Path:
        """Validate and persist a scenario."""
        valid, reason = validate_scenario(scenario)
        if not valid:
            raise ValueError(reason)
        return self._repository.save_payload(scenario.name, scenario_to_payload(scenario))

    def load_scenario(self, name: str) -> Scenario:
        """Load a stored scenario by name."""
        return payload_to_scenario(self._repository.load_payload(name))

    def rename_scenario(self, old_name: str, new_name: str) -> None:
        """Rename a stored scenario."""
        self._repository.rename(old_name, new_name)

    def delete_scenario(self, name: str) -> None:
        """Delete a stored scenario."""
        self._repository.delete(name)


def load_scenario_file(path: Path) -> Scenario:
    """Load a scenario from a JSON file outside the repository."""
    if not path.exists():
        raise FileNotFoundError(f"Scenario file '{path}' not found.")
    if not path.is_file():
        raise ValueError(f"Scenario path '{path}' is not a file.")
    return payload_to_scenario(read_payload(path))
