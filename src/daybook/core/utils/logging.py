"""
Logging configuration using loguru.

The CLI calls ``configure_logging()`` once at startup; library code just
imports ``logger`` from loguru and logs.
"""

import sys

from loguru import logger

_CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    rotation: str = "1 MB",
    retention: str = "30 days",
) -> None:
    """
    Configure loguru with stderr output and an optional rotating file.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None or empty, only logs to stderr.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    level = level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format=_FILE_FORMAT,
            rotation=rotation,
            retention=retention,
        )


def configure_logging(config, verbose: bool = False) -> None:
    """Set up logging from the ``logging.*`` config section.

    ``verbose`` forces DEBUG regardless of the configured level.
    """
    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING") or "WARNING")
    log_file = config.get("logging.file", "") or None
    setup_logging(level=level, log_file=log_file)
