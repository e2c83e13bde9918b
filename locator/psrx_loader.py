#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import importlib.util
import os
import sys
from types import ModuleType
from typing import Callable, List, Optional, Tuple

from psrx_context import LocatorContext
from psrx_logger import log_debug, log_stage
from psrx_matcher import MatchMode, match_path
from psrx_registry import PrefixRegistry

LoadSource = Callable[[str, str], object]


def load_python_source(path: str, module_name: str) -> ModuleType:
    """
    Execute the file at path as a Python module registered as module_name.

    The module is removed from sys.modules again if executing it fails.
    """
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load {path} as module '{module_name}'", name=module_name, path=path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


class ClassLoader:
    """
    Class-name front end over a PrefixRegistry:
      - strip leading separators from the class name
      - append the source suffix
      - resolve with the matcher (first match)
      - hand the file to load_source

    Entry points:
      - resolve(name): file for a class, or None.
      - resolve_and_load(name): resolve, then load; True if something was loaded.
    """

    def __init__(
        self,
        registry: PrefixRegistry | None = None,
        load_source: LoadSource | None = None,
        suffix: str = ".py",
        context: LocatorContext | None = None,
    ):
        self.context = context or (registry.context if registry is not None else LocatorContext.default())
        self.registry = registry if registry is not None else PrefixRegistry(context=self.context)
        self.load_source = load_source or self._load_python_module
        self.suffix = suffix
        # (class name, path) for every successful load, in order.
        self.loaded: List[Tuple[str, str]] = []

    @property
    def separator(self) -> str:
        return self.registry.separator

    def add_namespace(self, prefix: str, base_dir: str | os.PathLike, prepend: bool = False) -> None:
        self.registry.add_base(prefix, base_dir, prepend=prepend)

    def resolve(self, class_name: str) -> Optional[str]:
        class_name = class_name.lstrip(self.separator)
        return match_path(
            class_name + self.suffix,
            self.registry,
            self.separator,
            MatchMode.FIRST_MATCH,
            context=self.context,
        )

    def resolve_and_load(self, class_name: str) -> bool:
        log_stage(self.context, "Resolving class", class_name)
        path = self.resolve(class_name)
        if path is None:
            log_debug(self.context, f"Class '{class_name}' not found")
            return False

        class_name = class_name.lstrip(self.separator)
        log_debug(self.context, f"Loading class '{class_name}' from {path}")
        self.load_source(path, class_name)
        self.loaded.append((class_name, path))
        return True

    def _load_python_module(self, path: str, class_name: str) -> ModuleType:
        return load_python_source(path, class_name.replace(self.separator, "."))
