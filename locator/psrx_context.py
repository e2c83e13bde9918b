"""
Locator context for cross-cutting options.

This module defines the LocatorContext dataclass which holds the options that
affect every component (registry, matcher, locators, CLI), chiefly logging.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Hierarchical logging levels for psrx."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # Configuration summaries (-v)
    DEBUG = 30      # Every probed prefix and candidate (-vvv)


@dataclass
class LocatorContext:
    """
    Holds options shared by the registry, the matcher and the front ends.

    Attributes:
        log_rich_format:    If True, emit logs in rich format: timestamp and log level.
        log_level:          Current logging level.
    """
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'LocatorContext':
        """Create a LocatorContext with default settings."""
        return LocatorContext(log_level=LogLevel.WARNING)
