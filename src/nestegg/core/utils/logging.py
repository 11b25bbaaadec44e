"""
Logging configuration using loguru.

The calculators never log; the configuration layer and CLI do. Call
setup_logging() (or configure_from_config() with a loaded Config) at
startup, or just use loguru directly.
"""

import os
import sys

from loguru import logger

_VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru with console and optional file output.

    Args:
        level: Minimum log level, case-insensitive (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the console.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    level = level.upper()
    if level not in _VALID_LEVELS:
        level = "WARNING"

    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
            rotation=rotation,
            retention=retention,
        )


def configure_from_config(config, level_override: str | None = None) -> None:
    """Apply the ``logging`` section of a Config.

    A relative ``logging.file`` is placed under ``paths.log_dir``.
    """
    log_file = config.get("logging.file") or None
    if log_file and not os.path.isabs(os.path.expanduser(log_file)):
        log_file = os.path.join(config.get("paths.log_dir", ""), log_file)
    elif log_file:
        log_file = os.path.expanduser(log_file)

    setup_logging(level=level_override or config.get("logging.level", "WARNING"), log_file=log_file)
    logger.debug(f"Logging configured (file={log_file or 'none'})")
