"""
Logging utilities for psrx.

This module provides logging functions that respect the LocatorContext
log level and format flags.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import sys
import time
from typing import Optional

from psrx_context import LocatorContext, LogLevel


_LEVEL_TAGS = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARNING: "WARNING",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
}


def log(context: LocatorContext, log_level: LogLevel, message: str) -> None:
    """
    Print message to stderr if the context's logging level admits it.

    Args:
        context:    The locator context containing the logging level and format.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context.log_level < log_level:
        return
    prefix = ""
    tag = _LEVEL_TAGS.get(log_level)
    if context.log_rich_format and tag is not None:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = f"{timestamp} [{tag}] "
    print(f"{prefix}{message}", file=sys.stderr)


def log_error(context: LocatorContext, message: str) -> None:
    """Log an error-level message."""
    log(context, LogLevel.ERROR, message)


def log_warning(context: LocatorContext, message: str) -> None:
    """Log a warning-level message."""
    log(context, LogLevel.WARNING, message)


def log_info(context: LocatorContext, message: str) -> None:
    """Log an info-level message."""
    log(context, LogLevel.INFO, message)


def log_debug(context: LocatorContext, message: str) -> None:
    """Log a debug-level message."""
    log(context, LogLevel.DEBUG, message)


def log_stage(context: LocatorContext, stage: str, subject: Optional[str] = None) -> None:
    """
    Log the start of a resolution stage.

    Args:
        context: The locator context containing logging flags.
        stage: The name of the stage (e.g., "Resolving", "Loading").
        subject: Optional path, class name or URI being processed.
    """
    if subject:
        log(context, LogLevel.INFO, f"{stage} '{subject}'")
    else:
        log(context, LogLevel.INFO, f"{stage}...")
