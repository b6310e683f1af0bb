from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional, Union

from labyrinth.config.settings import MapLimits
from labyrinth.errors import InvalidMap, MapNotFound

from .cells import is_valid_cell
from .grid import Grid

logger = logging.getLogger(__name__)


def _strip_line_end(line: str) -> str:
    # Only line terminators are removed; other whitespace is map content.
    return line.rstrip("\r\n")


def parse_map(lines: Iterable[str], limits: Optional[MapLimits] = None) -> Grid:
    """Build a Grid from raw text lines.

    Blank lines (after stripping the line terminator) are skipped and do not
    count as rows. The first non-blank line fixes the column count; every
    later row must match it. Each line is checked as it is read, so the first
    violation in file order is the one reported.

    Args:
        lines: Raw lines, with or without trailing ``\\n``/``\\r\\n``.
        limits: Dimension bounds; defaults to 100x100.

    Raises:
        InvalidMap: on an empty map, a bad width, ragged rows, a character
            outside ``#``, ``.``, ``0``-``9``, or too many rows. A source with
            no non-blank line is rejected too: a Grid always has at least
            one row, so an empty map is an error rather than an empty print.
    """
    limits = limits or MapLimits()
    rows: List[str] = []
    cols = 0
    for lineno, raw in enumerate(lines, start=1):
        line = _strip_line_end(raw)
        if not line:
            continue
        if not rows:
            cols = len(line)
            if cols > limits.max_cols:
                raise InvalidMap(f"map is {cols} columns wide, maximum is {limits.max_cols}", line=lineno)
        elif len(line) != cols:
            raise InvalidMap(f"expected {cols} columns, found {len(line)}", line=lineno)
        for ch in line:
            if not is_valid_cell(ch):
                raise InvalidMap(f"invalid character {ch!r}", line=lineno)
        rows.append(line)
        if len(rows) > limits.max_rows:
            raise InvalidMap(f"map has more than {limits.max_rows} rows", line=lineno)

    if not rows:
        raise InvalidMap("map has no rows")
    return Grid.from_lines(rows)


def load_map(path: Union[str, os.PathLike], limits: Optional[MapLimits] = None) -> Grid:
    """Load and parse a map file.

    Both ``\\n`` and ``\\r\\n`` line endings are accepted. The file handle is
    closed on every exit path, including parse failures.

    Raises:
        MapNotFound: if the file cannot be opened for reading.
        InvalidMap: if the contents are not a valid map (see parse_map).
    """
    path_str = os.fspath(path)
    try:
        # Split on "\n" only; a stray "\r" inside a row stays content.
        fh = open(path_str, "r", encoding="utf-8", newline="\n")
    except OSError as exc:
        logger.debug("Failed to open map %s: %s", path_str, exc)
        raise MapNotFound(path_str, exc.strerror) from exc

    with fh:
        try:
            grid = parse_map(fh, limits)
        except UnicodeDecodeError as exc:
            raise InvalidMap(f"map file is not valid text: {exc.reason}") from exc
    logger.debug("Loaded map %s (%dx%d)", path_str, grid.rows, grid.cols)
    return grid


__all__ = ["parse_map", "load_map"]
