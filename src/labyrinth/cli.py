from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from . import __version__
from .config.settings import Settings
from .errors import InvalidArgs, LabyrinthError
from .game import run
from .logging_config import configure_logging
from .map.cells import player_glyph
from .movement.engine import Direction
from .render import write_grid

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises InvalidArgs instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgs(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="labyrinth",
        description="Validate a labyrinth map, optionally move one player, and print the map.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-m", "--map", dest="map_path", required=True, help="Path to the map file")
    parser.add_argument("-p", "--player", required=True, help="Player digit (0-9)")
    parser.add_argument(
        "--move",
        choices=[d.token for d in Direction],
        default=None,
        help="Move the player one step in this direction",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to a settings YAML file overriding the defaults",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser


def _fail(exc: LabyrinthError, usage: Optional[str] = None) -> int:
    if usage:
        sys.stderr.write(usage)
    print(f"error: {exc.to_human()}", file=sys.stderr)
    return exc.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool.

    Returns:
        0 after printing the map; 1 on any failure, with a diagnostic on
        stderr and nothing on stdout.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        player_glyph(args.player)
    except InvalidArgs as exc:
        return _fail(exc, parser.format_usage())
    except ValueError as exc:
        return _fail(InvalidArgs(str(exc)), parser.format_usage())

    try:
        settings = Settings.load(user_path=args.config_path)
        configure_logging(logging.DEBUG if args.debug else settings.log_level)
        grid = run(args.map_path, args.player, args.move, settings=settings)
    except LabyrinthError as exc:
        logger.info("Command failed (%s): %s", exc.kind, exc)
        return _fail(exc)

    write_grid(grid, sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
