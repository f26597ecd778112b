"""Solver logging with verbosity levels for progress, checks and debug output."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "rcpspt"

CHANGES_LEVEL = 25  # -v 1: new best makespans, batch progress
CHECKS_LEVEL = 15  # -v 2: abandoned trials, validation verdicts

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# -v value -> logger threshold; anything else stays at errors only
_VERBOSITY_LEVELS = {
    0: logging.ERROR,
    1: CHANGES_LEVEL,
    2: CHECKS_LEVEL,
    3: logging.DEBUG,
}


class RcpsptLogger(logging.Logger):
    """Logger with one method per solver verbosity level.

    ``changes()`` reports schedule improvements, ``checks()`` reports trials
    that were abandoned and solutions that were validated, and the standard
    ``debug()`` reports bounds, priorities and individual job placements.
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> RcpsptLogger:
    """Return the shared rcpspt logger."""
    logging.setLoggerClass(RcpsptLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, RcpsptLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """(Re)configure the rcpspt logger for a CLI verbosity.

    Args:
        verbosity: 0 errors only, 1 changes, 2 checks, 3 debug
        stream: Output stream, sys.stderr when omitted
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_VERBOSITY_LEVELS.get(verbosity, logging.ERROR))

    # Plain messages, no level prefix
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop all handlers and go back to errors only (used between tests)."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def checks_enabled() -> bool:
    """True when checks-level messages (verbosity >= 2) are emitted."""
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    """True when debug messages (verbosity 3) are emitted."""
    return get_logger().isEnabledFor(logging.DEBUG)
