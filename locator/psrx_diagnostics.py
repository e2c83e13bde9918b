#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from typing import Optional


DIAGNOSTIC_CODE_FAMILIES = {
    "REG": [
        "REG-0010",  # empty prefix
        "REG-0020",  # empty base directory
        "REG-0030",  # registration after seal()
        "REG-0040",  # separator is not a single character
    ],
    "URI": [
        "URI-0010",  # missing ':///'
        "URI-0020",  # empty scheme name in register_scheme()
        "URI-0030",  # no handler for scheme (warning)
    ],
    "CFG": [
        "CFG-0010",  # mapping is not PREFIX=DIR
    ],
    "CLI": [
        "CLI-0010",  # no match for path
        "CLI-0020",  # no match for URI
        "CLI-0030",  # no match for class
    ],
}


def all_codes() -> list[str]:
    return [code for family in DIAGNOSTIC_CODE_FAMILIES.values() for code in family]


@dataclass
class Diagnostic:
    kind: str  # "error" or "warning"
    message: str
    subject: Optional[str] = None  # path, URI or class name being resolved

    def format(self) -> str:
        loc = f"{self.subject}: " if self.subject is not None else ""
        return f"{loc}{self.kind}: {self.message}"
