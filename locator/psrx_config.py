#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import os
from typing import Iterable, List, Mapping, Optional, Tuple

from psrx_context import LocatorContext
from psrx_errors import ConfigError
from psrx_logger import log_info
from psrx_registry import PrefixRegistry

ENV_MAP = "PSRX_MAP"
ENV_PREPEND_MAP = "PSRX_PREPEND_MAP"

PrefixBase = Tuple[str, str]


def env_list_separator() -> str:
    # Same convention as PATH: ';' on Windows, ':' elsewhere.
    return ';' if os.name == 'nt' else ':'


def parse_mapping(text: str) -> PrefixBase:
    """
    Parse 'Foo\\Bar=src' into ('Foo\\Bar', 'src').
    """
    prefix, eq, base = text.partition("=")
    prefix = prefix.strip()
    base = base.strip()
    if not eq or not prefix or not base:
        raise ConfigError(f"[CFG-0010] invalid mapping '{text}': expected PREFIX=DIR")
    return prefix, base


def _mappings_from_value(value: Optional[str]) -> List[PrefixBase]:
    if not value:
        return []
    return [parse_mapping(entry) for entry in value.split(env_list_separator()) if entry.strip()]


def mappings_from_env(environ: Optional[Mapping[str, str]] = None) -> Tuple[List[PrefixBase], List[PrefixBase]]:
    """
    Read (append, prepend) mappings from $PSRX_MAP and $PSRX_PREPEND_MAP.
    """
    environ = os.environ if environ is None else environ
    return (
        _mappings_from_value(environ.get(ENV_MAP)),
        _mappings_from_value(environ.get(ENV_PREPEND_MAP)),
    )


def build_registry(
        append: Iterable[PrefixBase] = (),
        prepend: Iterable[PrefixBase] = (),
        separator: str = "\\",
        context: Optional[LocatorContext] = None,
        environ: Optional[Mapping[str, str]] = None,
) -> PrefixRegistry:
    """
    Build and seal a registry.

    Order: environment mappings, then explicit ones; appends before prepends,
    so a prepended base overrides every appended one for the same prefix.
    """
    context = context or LocatorContext.default()
    env_append, env_prepend = mappings_from_env(environ)

    registry = PrefixRegistry(separator=separator, context=context)
    for prefix, base in [*env_append, *append]:
        registry.add_base(prefix, base)
    for prefix, base in [*env_prepend, *prepend]:
        registry.add_base(prefix, base, prepend=True)
    registry.seal()

    for prefix in registry.prefixes():
        bases = ",".join(f"'{b}'" for b in registry.bases_for(prefix))
        log_info(context, f"Prefix '{prefix}': {bases}")
    if not len(registry):
        log_info(context, "No prefixes registered")
    return registry
