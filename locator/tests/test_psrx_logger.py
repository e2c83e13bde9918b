#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from psrx_context import LocatorContext, LogLevel
from psrx_logger import log_debug, log_error, log_info, log_stage, log_warning
from psrx_registry import PrefixRegistry


def test_messages_below_level_are_dropped(capsys):
    context = LocatorContext(log_level=LogLevel.WARNING)

    log_debug(context, "debug")
    log_info(context, "info")
    log_warning(context, "warning")
    log_error(context, "error")

    assert capsys.readouterr().err.splitlines() == ["warning", "error"]


def test_silent_context_prints_nothing(capsys):
    log_error(LocatorContext(log_level=LogLevel.SILENT), "error")

    assert capsys.readouterr().err == ""


def test_rich_format_has_level_tag(capsys):
    context = LocatorContext(log_level=LogLevel.DEBUG, log_rich_format=True)

    log_debug(context, "candidate")

    assert "[DEBUG] candidate" in capsys.readouterr().err


def test_log_stage(capsys):
    context = LocatorContext(log_level=LogLevel.INFO)

    log_stage(context, "Resolving class", "Foo\\Bar")
    log_stage(context, "Sealing")

    assert capsys.readouterr().err.splitlines() == ["Resolving class 'Foo\\Bar'", "Sealing..."]


def test_default_context_logs_warnings():
    assert LocatorContext.default().log_level == LogLevel.WARNING


def test_debug_context_traces_registration(capsys):
    registry = PrefixRegistry(context=LocatorContext(log_level=LogLevel.DEBUG))

    registry.add_base("Foo", "src")
    registry.add_base("Foo", "overrides", prepend=True)

    err = capsys.readouterr().err
    assert "Appended base 'src' for prefix 'Foo\\'" in err
    assert "Prepended base 'overrides' for prefix 'Foo\\'" in err


def test_rich_format_on_every_level(capsys):
    context = LocatorContext(log_level=LogLevel.DEBUG, log_rich_format=True)

    log_error(context, "e")
    log_warning(context, "w")
    log_info(context, "i")

    lines = capsys.readouterr().err.splitlines()
    assert [line.split(" ", 2)[2] for line in lines] == ["[ERROR] e", "[WARNING] w", "[INFO] i"]
