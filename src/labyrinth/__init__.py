"""
Labyrinth map tool.

Loads a character-grid map, checks that its open floor is a single connected
region, optionally moves or places one player, and prints the result.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
