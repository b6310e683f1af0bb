from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from labyrinth.errors import MoveFailed
from labyrinth.map.cells import FLOOR, player_glyph
from labyrinth.map.grid import Grid, Position

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Cardinal step directions. Values are (drow, dcol) offsets."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def token(self) -> str:
        return self.name.lower()

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Resolve a direction token (``up``, ``down``, ``left``, ``right``).

        Raises:
            MoveFailed: for any other value.
        """
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            for d in cls:
                if d.token == value:
                    return d
        raise MoveFailed(f"invalid direction {value!r}; expected one of up, down, left, right")


@dataclass(frozen=True)
class MoveResult:
    player: str
    origin: Optional[Position]
    position: Position
    placed: bool


class MovementEngine:
    """Applies a single move or placement to a grid in place."""

    def move(self, grid: Grid, player: Union[int, str], direction: Union[Direction, str]) -> MoveResult:
        """Move a player one step, or place it when it is not on the grid.

        The player's first occurrence in row-major order is the one that
        moves. A player that is absent is placed on the first floor cell in
        row-major order and the direction is not used beyond validation.
        On failure the grid is left untouched.

        Args:
            grid: Grid to mutate.
            player: Player identifier, an int 0-9 or a digit character.
            direction: Direction or its token.

        Returns:
            MoveResult describing the applied transition.

        Raises:
            MoveFailed: invalid direction, target outside the grid or not
                floor, or no floor cell to place an absent player on.
            ValueError: if player is not a single digit.
        """
        glyph = player_glyph(player)
        step = Direction.parse(direction)

        origin = grid.find(glyph)
        if origin is None:
            return self.place(grid, glyph)

        target = origin.offset(*step.offset)
        if not grid.is_within(target):
            logger.debug("Blocked move of %s: target %s outside %r", glyph, target, grid)
            raise MoveFailed(f"cannot move player {glyph} {step.token}: target is outside the map")

        occupant = grid.get(target)
        if occupant != FLOOR:
            logger.debug("Blocked move of %s: target %s holds %r", glyph, target, occupant)
            raise MoveFailed(f"cannot move player {glyph} {step.token}: target cell is not empty")

        grid.swap(origin, target)
        logger.debug("Player %s moves from %s to %s", glyph, origin, target)
        return MoveResult(player=glyph, origin=origin, position=target, placed=False)

    def place(self, grid: Grid, player: Union[int, str]) -> MoveResult:
        """Place a player on the first floor cell in row-major order.

        Raises:
            MoveFailed: if the grid has no floor cell.
        """
        glyph = player_glyph(player)
        target = grid.find(FLOOR)
        if target is None:
            raise MoveFailed(f"cannot place player {glyph}: no empty cell available")
        grid.set(target, glyph)
        logger.debug("Player %s placed at %s", glyph, target)
        return MoveResult(player=glyph, origin=None, position=target, placed=True)


__all__ = ["Direction", "MoveResult", "MovementEngine"]
