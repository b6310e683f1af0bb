from __future__ import annotations

import logging
import os
from typing import Optional, Union

from labyrinth.config.settings import Settings
from labyrinth.errors import InvalidArgs
from labyrinth.map.cells import player_glyph
from labyrinth.map.connectivity import validate_connectivity
from labyrinth.map.grid import Grid
from labyrinth.map.loader import load_map
from labyrinth.movement.engine import Direction, MovementEngine

logger = logging.getLogger(__name__)


def run(
    map_path: Union[str, os.PathLike],
    player: Union[int, str],
    direction: Optional[Union[Direction, str]] = None,
    settings: Optional[Settings] = None,
    engine: Optional[MovementEngine] = None,
) -> Grid:
    """Load, validate and optionally move, returning the final grid.

    One call performs at most one state transition. Rendering is left to the
    caller so nothing is printed unless every stage succeeds.

    Raises:
        InvalidArgs: if player is not a single digit 0-9 (checked before the
            map is opened).
        MapNotFound, InvalidMap, MultipleEmptyAreas, MoveFailed: from the
            stage that failed.
    """
    try:
        glyph = player_glyph(player)
    except ValueError as exc:
        raise InvalidArgs(str(exc)) from exc

    settings = settings or Settings()
    grid = load_map(map_path, settings.limits)
    validate_connectivity(grid)

    if direction is not None:
        result = (engine or MovementEngine()).move(grid, glyph, direction)
        logger.info(
            "Player %s %s at (%d, %d)",
            result.player,
            "placed" if result.placed else "moved",
            result.position.row,
            result.position.col,
        )
    return grid


__all__ = ["run"]
