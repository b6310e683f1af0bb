from __future__ import annotations

from typing import List, TextIO

from labyrinth.map.grid import Grid


def render_lines(grid: Grid) -> List[str]:
    return grid.to_lines()


def render(grid: Grid) -> str:
    """Serialize the grid as text, one row per line, each ending in ``\\n``."""
    return "".join(f"{line}\n" for line in render_lines(grid))


def write_grid(grid: Grid, stream: TextIO) -> None:
    stream.write(render(grid))


__all__ = ["render_lines", "render", "write_grid"]
