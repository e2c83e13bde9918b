#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import argparse
from typing import List

from psrx_config import build_registry, parse_mapping
from psrx_context import LocatorContext, LogLevel
from psrx_diagnostics import Diagnostic
from psrx_errors import PsrxError
from psrx_loader import ClassLoader
from psrx_locator import ResourceLocator, classpath_locator
from psrx_logger import log_error, log_info
from psrx_registry import PrefixRegistry


def build_locator_context(args: argparse.Namespace) -> LocatorContext:
    """Build a LocatorContext from command-line arguments."""
    verbosity = getattr(args, 'verbosity', 0)
    if verbosity >= 3:
        log_level = LogLevel.DEBUG
    elif verbosity >= 1:
        log_level = LogLevel.INFO
    else:
        log_level = LogLevel.ERROR

    return LocatorContext(
        log_rich_format=getattr(args, 'log', False),
        log_level=log_level,
    )


def build_prefix_registry(context: LocatorContext, args: argparse.Namespace) -> PrefixRegistry:
    append = [parse_mapping(m) for m in args.map]
    prepend = [parse_mapping(m) for m in args.prepend_map]
    return build_registry(append, prepend, separator=args.separator, context=context)


def _print_results(results: List[str]) -> None:
    for path in results:
        print(path)


def _report_no_match(context: LocatorContext, code: str, what: str, subject: str) -> int:
    log_error(context, Diagnostic(kind="error", message=f"[{code}] no match for {what}", subject=subject).format())
    return 1


def cmd_find(args: argparse.Namespace, context: LocatorContext, registry: PrefixRegistry) -> int:
    """Print the first readable match for a namespaced path."""
    match = ResourceLocator(registry).find_namespaced_resource(args.path)
    if match is None:
        return _report_no_match(context, "CLI-0010", "path", args.path)
    print(match)
    return 0


def cmd_variants(args: argparse.Namespace, context: LocatorContext, registry: PrefixRegistry) -> int:
    """Print every readable match for a namespaced path."""
    matches = ResourceLocator(registry).find_resource_variants(args.path)
    if not matches:
        return _report_no_match(context, "CLI-0010", "path", args.path)
    _print_results(matches)
    return 0


def cmd_uri(args: argparse.Namespace, context: LocatorContext, registry: PrefixRegistry) -> int:
    """Resolve a 'classpath:///...' URI."""
    locator = classpath_locator(registry)
    if args.all:
        results = locator.find_resource_variants(args.uri)
    else:
        match = locator.find_resource(args.uri)
        results = [match] if match is not None else []
    if not results:
        return _report_no_match(context, "CLI-0020", "URI", args.uri)
    _print_results(results)
    return 0


def cmd_class(args: argparse.Namespace, context: LocatorContext, registry: PrefixRegistry) -> int:
    """Print the source file a class name resolves to (without loading it)."""
    loader = ClassLoader(registry, suffix=args.suffix)
    match = loader.resolve(args.name)
    if match is None:
        return _report_no_match(context, "CLI-0030", "class", args.name)
    print(match)
    return 0


def cmd_map(args: argparse.Namespace, context: LocatorContext, registry: PrefixRegistry) -> int:
    """Dump the registry, bases in probe order."""
    if not len(registry):
        print("<none>")
        return 0
    for prefix in registry.prefixes():
        for base in registry.bases_for(prefix):
            print(f"{prefix} -> {base}")
    return 0


def _add_path_arg(parser: argparse.ArgumentParser) -> None:
    """Add the namespaced path argument."""
    parser.add_argument("path", help="Namespaced path (e.g. 'Foo\\Bar\\Baz.php')")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="psrx", description="Prefix-mapped class and resource locator")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    parser.add_argument("-v", "--verbose",
                        action='count',
                        default=0,
                        dest='verbosity',
                        help="Increase verbosity: -v=INFO, -vvv=DEBUG")
    parser.add_argument("-l", "--log",
                        action='store_true',
                        default=False,
                        help="Enable rich log formatting (timestamps, levels)")
    parser.add_argument(
        "-m", "--map",
        action="append",
        default=[],
        metavar="PREFIX=DIR",
        help="Append a base directory for a prefix (can be passed multiple times; also $PSRX_MAP)",
    )
    parser.add_argument(
        "-p", "--prepend-map",
        action="append",
        default=[],
        metavar="PREFIX=DIR",
        help="Prepend an override base directory for a prefix (can be passed multiple times; also $PSRX_PREPEND_MAP)",
    )
    parser.add_argument(
        "--separator",
        default="\\",
        help="Namespace separator used by prefixes and paths (default: '\\')",
    )

    p_find = subparsers.add_parser("find", help="Find the first match for a namespaced path")
    _add_path_arg(p_find)
    p_find.set_defaults(func=cmd_find)

    p_variants = subparsers.add_parser("variants", help="Find all matches for a namespaced path")
    _add_path_arg(p_variants)
    p_variants.set_defaults(func=cmd_variants)

    p_uri = subparsers.add_parser("uri", help="Resolve a classpath:/// URI")
    p_uri.add_argument("uri", help="Resource URI (e.g. 'classpath:///Foo/Bar/Baz.php')")
    p_uri.add_argument("--all", "-a", action="store_true", help="Print every variant, not just the first")
    p_uri.set_defaults(func=cmd_uri)

    p_class = subparsers.add_parser("class", help="Resolve a class name to its source file")
    p_class.add_argument("name", help="Fully-qualified class name (e.g. 'Foo\\Bar\\Baz')")
    p_class.add_argument("--suffix", default=".py", help="Source file suffix (default: .py)")
    p_class.set_defaults(func=cmd_class)

    p_map = subparsers.add_parser("map", help="Dump registered prefixes and base directories")
    p_map.set_defaults(func=cmd_map)

    args = parser.parse_args(argv)

    context = build_locator_context(args)
    try:
        registry = build_prefix_registry(context, args)
        log_info(context, f"Running '{args.command}'")
        rc = args.func(args, context, registry)
    except PsrxError as e:
        log_error(context, e.format())
        rc = 1
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
