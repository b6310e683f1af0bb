from __future__ import annotations

import logging
from typing import FrozenSet, Iterator, List, Set

from labyrinth.errors import MultipleEmptyAreas

from .cells import is_empty
from .grid import Grid, Position

logger = logging.getLogger(__name__)


def _flood(grid: Grid, start: Position, visited: Set[Position]) -> FrozenSet[Position]:
    """Collect every empty cell 4-connected to start, marking each visited."""
    area = {start}
    visited.add(start)
    stack: List[Position] = [start]
    while stack:
        pos = stack.pop()
        for n in grid.neighbors(pos):
            if n in visited:
                continue
            if not is_empty(grid.get(n)):
                continue
            visited.add(n)
            area.add(n)
            stack.append(n)
    return frozenset(area)


def iter_empty_areas(grid: Grid) -> Iterator[FrozenSet[Position]]:
    """Yield each empty area of the grid, lazily, in discovery order.

    Cells holding floor or a player digit are empty. A new area starts at
    every unvisited empty cell met during a row-major scan, so stopping the
    iteration early skips the rest of the scan.
    """
    visited: Set[Position] = set()
    for pos in grid.positions():
        if pos in visited or not is_empty(grid.get(pos)):
            continue
        yield _flood(grid, pos, visited)


def count_empty_areas(grid: Grid) -> int:
    return sum(1 for _ in iter_empty_areas(grid))


def validate_connectivity(grid: Grid) -> int:
    """Check that the grid's empty cells form at most one area.

    A grid without any empty cell is valid. Fails as soon as a second area
    is discovered.

    Returns:
        The number of empty areas found (0 or 1).

    Raises:
        MultipleEmptyAreas: when a second area exists.
    """
    count = 0
    for area in iter_empty_areas(grid):
        count += 1
        if count > 1:
            logger.debug("Second empty area found starting near %s (%d cells)", min(area), len(area))
            raise MultipleEmptyAreas()
    logger.debug("Connectivity ok for %r: %d empty area(s)", grid, count)
    return count


__all__ = ["iter_empty_areas", "count_empty_areas", "validate_connectivity"]
