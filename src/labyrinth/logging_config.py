import logging
import sys
from typing import Union


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger on stderr.

    stdout carries the rendered map, so log records never go there. String
    levels are resolved by name; unknown names fall back to WARNING.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates when main() runs repeatedly
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
