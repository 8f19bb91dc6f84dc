"""Project logger with verbosity levels for the scheduling passes."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Custom levels sit between the standard ones
CHANGES_LEVEL = 25  # INFO < CHANGES < WARNING - verbosity 1
CHECKS_LEVEL = 15  # DEBUG < CHECKS < INFO - verbosity 2

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0  # Errors only
VERBOSITY_CHANGES = 1  # Task placements and input warnings
VERBOSITY_CHECKS = 2  # Validation and graph checks
VERBOSITY_DEBUG = 3  # Per-task forward/backward pass values

_LEVELS = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_CHANGES: CHANGES_LEVEL,
    VERBOSITY_CHECKS: CHECKS_LEVEL,
    VERBOSITY_DEBUG: logging.DEBUG,
}


class GanttplanLogger(logging.Logger):
    """Logger with one method per verbosity level.

    - changes(): level 1, what the scheduler decided (placements, warnings)
    - checks(): level 2, what the scheduler looked at (validation, ordering)
    - debug(): level 3, raw pass values (ES/EF/LS/LF per task)
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> GanttplanLogger:
    """Return the shared ``ganttplan`` logger."""
    logging.setLoggerClass(GanttplanLogger)
    logger = logging.getLogger("ganttplan")
    assert isinstance(logger, GanttplanLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the logger for a verbosity level (0-3).

    Safe to call repeatedly; existing handlers are replaced.

    Args:
        verbosity: 0=silent (errors only), 1=changes, 2=checks, 3=debug
        stream: Output stream, defaults to stderr
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVELS.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to errors-only. Used between tests."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def changes_enabled() -> bool:
    return get_logger().isEnabledFor(CHANGES_LEVEL)


def checks_enabled() -> bool:
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    return get_logger().isEnabledFor(logging.DEBUG)
