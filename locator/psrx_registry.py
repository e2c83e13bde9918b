#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import os
from dataclasses import dataclass, field
from typing import Dict, List

from psrx_context import LocatorContext
from psrx_errors import RegistryError
from psrx_logger import log_debug


def _strip_trailing_dir_separators(base_dir: str) -> str:
    seps = os.sep + (os.altsep or "")
    stripped = base_dir.rstrip(seps)
    # "/" must stay the filesystem root, not become the current directory.
    return stripped or base_dir[0]


def check_separator(separator: str) -> None:
    """
    Namespace separators are exactly one character; anything else cannot
    delimit prefixes consistently.
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise RegistryError(f"[REG-0040] namespace separator must be a single character, got {separator!r}")


@dataclass
class PrefixRegistry:
    """
    Namespace prefix -> ordered base directories.

    - separator: namespace separator used to normalize prefixes (e.g. '\\').
    - mappings: 'Foo\\Bar\\' -> ['overrides', 'src']; index 0 is probed first.

    Registration rule: add_base() appends (fallback) unless prepend=True
    (override). Once seal() is called the registry is read-only and may be
    shared by concurrent lookups.
    """
    separator: str = "\\"
    mappings: Dict[str, List[str]] = field(default_factory=dict)
    context: LocatorContext = field(default_factory=LocatorContext.default, repr=False, compare=False)
    _sealed: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_separator(self.separator)

    def normalize_prefix(self, prefix: str | None) -> str:
        """
        Convert 'Foo\\Bar', '\\Foo\\Bar\\' etc. to 'Foo\\Bar\\'.
        """
        stripped = (prefix or "").strip(self.separator)
        if not stripped:
            raise RegistryError(f"[REG-0010] empty namespace prefix {prefix!r}")
        return stripped + self.separator

    def add_base(self, prefix: str, base_dir: str | os.PathLike, prepend: bool = False) -> None:
        if self._sealed:
            raise RegistryError(
                f"[REG-0030] cannot register {base_dir!r} for {prefix!r}: registry is sealed"
            )
        key = self.normalize_prefix(prefix)
        base = os.fspath(base_dir) if base_dir is not None else ""
        if not base:
            raise RegistryError(f"[REG-0020] empty base directory for prefix '{key}'")
        base = _strip_trailing_dir_separators(base)

        bases = self.mappings.setdefault(key, [])
        if prepend:
            bases.insert(0, base)
        else:
            bases.append(base)
        log_debug(
            self.context,
            f"{'Prepended' if prepend else 'Appended'} base '{base}' for prefix '{key}' "
            f"({len(bases)} base(s))",
        )

    def bases_for(self, prefix: str) -> List[str]:
        """
        Base directories registered for exactly this (normalized) prefix,
        highest priority first. Unknown prefixes yield an empty list.
        """
        return list(self.mappings.get(prefix, ()))

    def prefixes(self) -> List[str]:
        return list(self.mappings.keys())

    def seal(self) -> None:
        self._sealed = True
        log_debug(self.context, f"Registry sealed with {len(self.mappings)} prefix(es)")

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __contains__(self, prefix: str) -> bool:
        return prefix in self.mappings

    def __len__(self) -> int:
        return len(self.mappings)
