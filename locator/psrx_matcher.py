"""
Longest-prefix-first path matching.

Given a namespaced path such as 'Foo\\Bar\\Baz.php', the matcher first looks
the whole path up in the registry, then shrinks the prefix one segment at a
time ('Foo\\Bar\\', then 'Foo\\'), each time probing every registered base
directory with the remaining relative path appended:

    prefix          relative        candidate
    Foo\\Bar\\Baz.php ""            <base>
    Foo\\Bar\\       \\Baz.php        <base>/Baz.php
    Foo\\            \\Bar\\Baz.php   <base>/Bar/Baz.php

More specific prefixes therefore win over shallower ones, and within one
prefix the registry order (prepend/append) decides.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import os
from enum import Enum, auto
from typing import Callable, List, Optional

from psrx_context import LocatorContext
from psrx_logger import log_debug
from psrx_registry import PrefixRegistry, check_separator

ReadablePredicate = Callable[[str], bool]


class MatchMode(Enum):
    FIRST_MATCH = auto()
    ALL_MATCHES = auto()


def is_readable(path: str) -> bool:
    """
    True if path names a file or directory we may read. Never raises.
    """
    try:
        return os.access(path, os.R_OK)
    except (OSError, ValueError):
        return False


def match_path(
        path: str,
        registry: PrefixRegistry,
        separator: str,
        mode: MatchMode = MatchMode.FIRST_MATCH,
        *,
        is_readable: ReadablePredicate = is_readable,
        context: Optional[LocatorContext] = None,
) -> Optional[str] | List[str]:
    """
    Resolve path against registry.

    Returns the first readable candidate (or None) in FIRST_MATCH mode, and
    the list of all readable candidates in discovery order in ALL_MATCHES
    mode.

    A separator that is not exactly one character raises RegistryError
    before anything is probed.
    """
    check_separator(separator)
    context = context or registry.context
    first_only = mode is MatchMode.FIRST_MATCH
    matches: List[str] = []

    if not path:
        log_debug(context, "Empty path: nothing to match")
        return None if first_only else matches

    path_prefix = path
    relative_path = ""
    # Index of the separator dividing prefix from relative path. Starts on the
    # last character so that a trailing separator is not split off again.
    boundary = len(path) - 1

    while True:
        bases = registry.bases_for(path_prefix)
        if bases:
            native_relative = relative_path.replace(separator, os.sep)
            for base in bases:
                candidate = base + native_relative
                if not is_readable(candidate):
                    log_debug(context, f"  '{path_prefix}': {candidate} not readable")
                    continue
                log_debug(context, f"  '{path_prefix}': matched {candidate}")
                if first_only:
                    return candidate
                matches.append(candidate)

        # The root boundary is the last prefix there is.
        if path_prefix == separator:
            break

        boundary = path.rfind(separator, 0, boundary)
        if boundary <= 0:
            # No separator left, or only a leading one: the whole path is consumed.
            break

        relative_path = path[boundary:]
        path_prefix = path[:boundary + 1]

    if first_only:
        log_debug(context, f"No match for '{path}'")
        return None
    log_debug(context, f"{len(matches)} match(es) for '{path}'")
    return matches


def first_match(path: str, registry: PrefixRegistry, separator: str, **kwargs) -> Optional[str]:
    return match_path(path, registry, separator, MatchMode.FIRST_MATCH, **kwargs)


def all_matches(path: str, registry: PrefixRegistry, separator: str, **kwargs) -> List[str]:
    return match_path(path, registry, separator, MatchMode.ALL_MATCHES, **kwargs)
