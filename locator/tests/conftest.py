#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path
from textwrap import dedent

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from psrx_context import LocatorContext, LogLevel
from psrx_registry import PrefixRegistry


@pytest.fixture
def context() -> LocatorContext:
    return LocatorContext(log_level=LogLevel.SILENT)


@pytest.fixture
def registry(context: LocatorContext) -> PrefixRegistry:
    return PrefixRegistry(context=context)


@pytest.fixture
def write_file():
    """Write a file below root, creating parent directories.

    Usage:
        def test_something(write_file, tmp_path):
            write_file(tmp_path / "src", "Foo/Baz.php", "<?php")
    """

    def _write(root: Path, rel: str, content: str = "") -> Path:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def foo_bar_tree(tmp_path: Path, write_file, registry: PrefixRegistry):
    """
    'Foo\\Bar' -> [overrides, src], with:
      overrides/Baz.php   (no src/Baz.php)
      src/Bat.php         (no overrides/Bat.php)
    """
    src = tmp_path / "src"
    overrides = tmp_path / "overrides"
    write_file(overrides, "Baz.php", "<?php class Baz {}")
    write_file(src, "Bat.php", "<?php class Bat {}")

    registry.add_base("Foo\\Bar", str(src))
    registry.add_base("Foo\\Bar", str(overrides), prepend=True)
    return src, overrides


def native(base: Path, *parts: str) -> str:
    """Expected candidate string: base followed by os.sep-joined parts."""
    return str(base.joinpath(*parts))
