from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s|%(name)s:%(lineno)d|%(message)s"


def init_logging(verbose: bool = False) -> None:
    """Configure the package logger once; later calls only adjust the level."""
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger("recipematch")
    root.setLevel(level)
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
