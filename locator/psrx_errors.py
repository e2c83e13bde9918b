#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

# psrx_errors.py
from __future__ import annotations

import re

_CODE_RE = re.compile(r"\[([A-Z]{3}-\d{4})\]")


class PsrxError(ValueError):
    """
    Base for configuration mistakes reported by psrx.

    "No match" is never an error; these are raised for input that could not
    be turned into a usable mapping or lookup in the first place.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> str | None:
        m = _CODE_RE.search(self.message)
        return m.group(1) if m else None

    def format(self) -> str:
        return f"error: {self.message}"


class RegistryError(PsrxError):
    """Invalid registration: empty prefix or base, or a sealed registry."""


class LocatorError(PsrxError):
    """Malformed URI or invalid scheme registration."""


class ConfigError(PsrxError):
    """Malformed mapping in the environment or on the command line."""
