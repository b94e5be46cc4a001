"""Logging configuration for panelkit using loguru.

The package disables its own records on import (see ``panelkit/__init__.py``)
so that embedding applications stay quiet. Calling :func:`setup_logger`
re-enables them and installs the requested sinks.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Store the configured log file path to ensure consistency
_log_file_path: Optional[Path] = None


def setup_logger(
    log_file: Optional[str | Path] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = True,
) -> None:
    """
    Configure loguru logger with console and optional file output.

    Args:
        log_file: Path to a log file. Relative paths resolve against the
            current working directory. If None, the previously configured
            file is reused, and no file sink is added when none was set.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to stderr
    """
    global _log_file_path

    if log_file is not None:
        _log_file_path = Path(log_file).resolve()

    # Remove default handler
    logger.remove()
    logger.configure(extra={"name": "-"})
    logger.enable("panelkit")

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if _log_file_path is not None:
        logger.add(
            str(_log_file_path),
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )


def get_logger(name: Optional[str] = None):
    """
    Get a logger bound to a component name.

    Args:
        name: Optional name for the logger, shown in the ``name`` column

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "panelkit")
