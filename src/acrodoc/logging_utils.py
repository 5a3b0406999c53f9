#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Centralized logging utilities for the acrodoc command line."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "acrodoc"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure the acrodoc logger hierarchy for CLI use.

    Diagnostics from the registry, style engine and configuration loader are
    all emitted below the ``acrodoc`` logger, so only that logger is touched;
    a host application embedding the library keeps its own root handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "WARNING").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    resolved_level = (
        log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.WARNING)
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    format_str = (
        "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "[acrodoc] %(levelname)s: %(message)s"
    )
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
