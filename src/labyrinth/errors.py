from __future__ import annotations

from typing import Optional


class LabyrinthError(Exception):
    """Base error for labyrinth domain failures.

    Every subclass maps to a process exit code so the CLI can classify it
    without inspecting the message.
    """

    exit_code: int = 1
    kind: str = "error"

    def to_human(self) -> str:
        return str(self)


class InvalidArgs(LabyrinthError):
    """Raised when required flags are missing or an argument is malformed."""

    kind = "invalid_args"


class MapNotFound(LabyrinthError):
    """Raised when the map file cannot be opened for reading."""

    kind = "map_not_found"

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"cannot open map file {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path


class InvalidMap(LabyrinthError):
    """Raised for structural map violations (shape, size or alphabet)."""

    kind = "invalid_map"

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class MultipleEmptyAreas(LabyrinthError):
    """Raised when the floor does not form a single 4-connected region."""

    kind = "multiple_empty_areas"

    def __init__(self, message: str = "map contains more than one empty area") -> None:
        super().__init__(message)


class MoveFailed(LabyrinthError):
    """Raised when a requested move or placement cannot be applied."""

    kind = "move_failed"


class ConfigError(LabyrinthError):
    """Raised when settings cannot be read or fail schema validation."""

    kind = "config_error"

    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            parts.append(f" - {e}")
        return "\n".join(parts)


__all__ = [
    "LabyrinthError",
    "InvalidArgs",
    "MapNotFound",
    "InvalidMap",
    "MultipleEmptyAreas",
    "MoveFailed",
    "ConfigError",
]
