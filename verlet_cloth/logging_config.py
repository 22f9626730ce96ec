"""
Logging setup for command-line runs.

Library modules only create loggers under the ``verlet_cloth`` namespace;
handlers are attached here, once, by the entry point.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "verlet_cloth"

# -q / default / -v / -vv
VERBOSITY_LEVELS = {-1: logging.WARNING, 0: logging.INFO, 1: logging.DEBUG}


def level_for_verbosity(verbosity: int) -> int:
    """Map a CLI verbosity count (-q is -1, each -v adds one) to a level."""
    verbosity = max(min(verbosity, 1), -1)
    return VERBOSITY_LEVELS[verbosity]


def setup_logging(verbosity: int = 0, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Console output is terse at the default level and gains the module name
    once debugging is on. The optional log file always records DEBUG with
    full timestamps, so a quiet console run can still be diagnosed later.

    Args:
        verbosity: -1 for warnings only, 0 for progress, 1 or more for debug.
        log_file: Optional path for a debug-level log file (overwritten).

    Returns:
        The configured package logger.
    """
    level = level_for_verbosity(verbosity)
    logger = logging.getLogger(PACKAGE_LOGGER)

    # Repeated calls (tests, re-entrant main) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    if level <= logging.DEBUG:
        console.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    else:
        console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    logger_level = level
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger_level = logging.DEBUG

    logger.setLevel(logger_level)
    return logger
