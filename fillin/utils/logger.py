"""Logging utilities tailored for fill-in solving."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stderr handler on the root logger.

    ``main.py`` calls this once, before loading the puzzle, with the level
    from ``--log-level``. ``--log-steps`` forces DEBUG: the solver then logs
    the board, the remaining words, the crossing cells and the candidates
    for every node, plus one line per trial placement, which runs to
    thousands of lines on a 15x15 board. Library code never calls this
    directly; ``get_logger`` falls back to it only when nothing is set up.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "fillin")
