"""
Logging configuration for wgmint.

Every module logs through `get_logger(__name__)`, which places its logger
under the `wgmint` namespace. The library installs no handlers on import;
applications call `setup_logging()` when they want console output.
"""

import logging
import sys

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Usage:
        from wgmint.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Generated peer config")
    """
    if name in _loggers:
        return _loggers[name]

    qualified = name if name == "wgmint" or name.startswith("wgmint.") else f"wgmint.{name}"
    logger = logging.getLogger(qualified)
    _loggers[name] = logger
    return logger


def setup_logging(level: str = "INFO", debug_mode: bool = False) -> None:
    """
    Configure console logging for the `wgmint` namespace.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        debug_mode: Force DEBUG and include module/line in each record
    """
    if debug_mode:
        level = "DEBUG"

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level {level!r}; use DEBUG, INFO, WARNING or ERROR")

    root_logger = logging.getLogger("wgmint")
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if debug_mode:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialized (level=%s, debug=%s)", level, debug_mode)
