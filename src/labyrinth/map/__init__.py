"""Map model, loading and connectivity checks."""

from .connectivity import count_empty_areas, iter_empty_areas, validate_connectivity
from .grid import Grid, Position
from .loader import load_map, parse_map

__all__ = [
    "Grid",
    "Position",
    "load_map",
    "parse_map",
    "iter_empty_areas",
    "count_empty_areas",
    "validate_connectivity",
]
