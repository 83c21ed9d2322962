# simulations/log.py

from __future__ import annotations

import logging


LOGGER_NAME = "balanced_allocations"


def get_logger(*, verbose: bool = False) -> logging.Logger:
    """
    Configure and return the diagnostics logger.

    Everything under "balanced_allocations" (the core processes and the
    simulations runner) goes to stderr, leaving stdout for the report.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times in-process.
    if getattr(logger, "_configured", False):
        for h in logger.handlers:
            h.setLevel(level)
        return logger

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)

    logger.addHandler(sh)
    logger.propagate = False
    logger._configured = True  # type: ignore[attr-defined]
    return logger
