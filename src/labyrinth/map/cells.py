from __future__ import annotations

from typing import FrozenSet, Union

WALL = "#"
FLOOR = "."
PLAYER_GLYPHS = "0123456789"

# Full alphabet a map cell may hold.
VALID_CELLS: FrozenSet[str] = frozenset(WALL + FLOOR + PLAYER_GLYPHS)


def is_valid_cell(ch: str) -> bool:
    return ch in VALID_CELLS


def is_floor(ch: str) -> bool:
    return ch == FLOOR


def is_player(ch: str) -> bool:
    """Return True for a player marker (an ASCII digit 0-9)."""
    return len(ch) == 1 and ch in PLAYER_GLYPHS


def is_empty(ch: str) -> bool:
    """Return True if the cell counts as open space for connectivity.

    Players stand on floor, so a digit never splits a region.
    """
    return is_floor(ch) or is_player(ch)


def player_glyph(player: Union[int, str]) -> str:
    """Normalize a player identifier to its single digit character.

    Accepts an int in 0..9 or a one-character ASCII digit string.

    Raises:
        ValueError: for anything else (multi-character, non-digit, out of range).
    """
    if isinstance(player, bool):
        raise ValueError(f"invalid player identifier: {player!r}")
    if isinstance(player, int):
        if 0 <= player <= 9:
            return str(player)
        raise ValueError(f"player must be between 0 and 9, got {player}")
    if isinstance(player, str) and is_player(player):
        return player
    raise ValueError(f"player must be a single digit between 0 and 9, got {player!r}")


__all__ = [
    "WALL",
    "FLOOR",
    "PLAYER_GLYPHS",
    "VALID_CELLS",
    "is_valid_cell",
    "is_floor",
    "is_player",
    "is_empty",
    "player_glyph",
]
