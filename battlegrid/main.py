"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from battlegrid.game.core.models import Scenario
from battlegrid.game.core.scenario import default_scenario, run_scenario
from battlegrid.game.infra.app_data import ensure_app_data_dirs
from battlegrid.game.infra.config import load_default_env_files, load_settings
from battlegrid.game.infra.logging import setup_logging, shutdown_logging
from battlegrid.game.scenarios.repository import ScenarioRepository
from battlegrid.game.scenarios.service import ScenarioService, load_scenario_file
from battlegrid.game.ui.text_view import RENDER_STYLES, render_board, render_legend

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battlegrid",
        description="Place ships and skill areas on a 10x10 board and print the result.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--scenario", default=None, help="Name of a stored scenario")
    source.add_argument("--scenario-file", type=Path, default=None, help="Path to a scenario JSON file")
    parser.add_argument("--style", choices=RENDER_STYLES, default=None, help="Board render style")
    parser.add_argument("--list", action="store_true", help="List stored scenarios and exit")
    parser.add_argument(
        "--save-default",
        action="store_true",
        help="Write the built-in scenario to the scenarios directory and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the battlegrid simulation."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    settings = load_settings()
    paths = ensure_app_data_dirs()
    setup_logging(settings)
    try:
        return _run(args, ScenarioService(ScenarioRepository(paths["scenarios"])), settings.render_style)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace, service: ScenarioService, default_style: str) -> int:
    if args.list:
        for name in service.list_scenarios():
            print(name)
        return EXIT_OK

    if args.save_default:
        path = service.save_scenario(default_scenario())
        print(f"Saved default scenario to {path}")
        return EXIT_OK

    try:
        scenario = _resolve_scenario(args, service)
    except (OSError, ValueError) as exc:
        logger.debug("scenario_load_failed reason=%s", exc)
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    style = args.style or default_style
    if style not in RENDER_STYLES:
        logger.warning("unknown_render_style style=%s fallback=numeric", style)
        style = "numeric"

    result = run_scenario(scenario)
    if not result.ok:
        ship = result.rejected
        print(
            f"ERROR: could not place ship '{ship.name}' at ({ship.bow.row},{ship.bow.col}).",
            file=sys.stderr,
        )
        return EXIT_REJECTED

    print(render_legend(style))
    print()
    print(render_board(result.board, style))
    return EXIT_OK


def _resolve_scenario(args: argparse.Namespace, service: ScenarioService) -> Scenario:
    if args.scenario_file is not None:
        return load_scenario_file(args.scenario_file)
    if args.scenario is not None:
        return service.load_scenario(args.scenario)
    return default_scenario()


if __name__ == "__main__":
    raise SystemExit(main())
