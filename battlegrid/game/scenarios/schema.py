"""Scenario data schema and validation helpers."""

from __future__ import annotations

from battlegrid.game.core.models import (
    BOARD_SIZE,
    SHIP_SIZE,
    Coord,
    Orientation,
    Scenario,
    ShipRequest,
    SkillRequest,
    SkillType,
)

SCHEMA_VERSION = 1


def scenario_to_payload(scenario: Scenario) -> dict[str, object]:
    """Convert a scenario to a JSON-serializable payload."""
    return {
        "version": SCHEMA_VERSION,
        "name": scenario.name,
        "grid_size": BOARD_SIZE,
        "ships": [
            {
                "name": ship.name,
                "bow": [ship.bow.row, ship.bow.col],
                "orientation": ship.orientation.value,
                "length": ship.length,
            }
            for ship in scenario.ships
        ],
        "skills": [
            {
                "type": skill.skill.value,
                "origin": [skill.origin.row, skill.origin.col],
            }
            for skill in scenario.skills
        ],
    }


def payload_to_scenario(payload: dict[str, object]) -> Scenario:
    """Convert a loaded payload into a scenario."""
    if _int_value(payload.get("version", -1), "version") != SCHEMA_VERSION:
        raise ValueError("Unsupported scenario version.")
    name = _text_value(payload.get("name"))
    if not name:
        raise ValueError("Scenario name is required.")
    if _int_value(payload.get("grid_size", BOARD_SIZE), "grid_size") != BOARD_SIZE:
        raise ValueError("Scenario grid size mismatch.")

    raw_ships = payload.get("ships", [])
    if not isinstance(raw_ships, list):
        raise ValueError("Scenario ships must be a list.")
    raw_skills = payload.get("skills", [])
    if not isinstance(raw_skills, list):
        raise ValueError("Scenario skills must be a list.")

    ships = [_ship_from_item(item, index) for index, item in enumerate(raw_ships, start=1)]
    skills = [_skill_from_item(item) for item in raw_skills]
    return Scenario(name=name, ships=ships, skills=skills)


def _ship_from_item(item: object, index: int) -> ShipRequest:
    if not isinstance(item, dict):
        raise ValueError("Each scenario ship must be an object.")
    try:
        bow = _coord_from_pair(item["bow"], "bow")
        orientation = Orientation(str(item["orientation"]))
        length = _int_value(item.get("length", SHIP_SIZE), "length")
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Malformed ship entry in scenario payload.") from exc
    if length < 0:
        raise ValueError("Ship length cannot be negative.")
    name = _text_value(item.get("name")) or f"ship-{index}"
    return ShipRequest(name=name, bow=bow, orientation=orientation, length=length)


def _skill_from_item(item: object) -> SkillRequest:
    if not isinstance(item, dict):
        raise ValueError("Each scenario skill must be an object.")
    try:
        skill = SkillType(str(item["type"]))
        origin = _coord_from_pair(item["origin"], "origin")
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Malformed skill entry in scenario payload.") from exc
    return SkillRequest(skill=skill, origin=origin)


def _coord_from_pair(value: object, label: str) -> Coord:
    if not isinstance(value, list) or len(value) != 2:
        raise ValueError(f"Scenario {label} must be a 2-item list.")
    return Coord(row=_int_value(value[0], label), col=_int_value(value[1], label))


def _int_value(value: object, label: str) -> int:
    """Accept plain ints or integer strings; bools and floats are rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError(f"Scenario {label} must be an integer.")


def _text_value(value: object) -> str:
    # Non-string names count as missing.
    if not isinstance(value, str):
        return ""
    return value.strip()
