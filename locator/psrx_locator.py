#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from typing import Dict, List, Optional, Protocol, Tuple

from psrx_context import LocatorContext
from psrx_errors import LocatorError
from psrx_logger import log_debug, log_warning
from psrx_matcher import MatchMode, match_path
from psrx_registry import PrefixRegistry

URI_MARKER = ":///"
CLASSPATH_SCHEME = "classpath"


class SchemeHandler(Protocol):
    separator: str

    def find_resource(self, normalized_path: str) -> Optional[str]: ...

    def find_resource_variants(self, normalized_path: str) -> List[str]: ...


class ResourceLocator:
    """
    Resource lookups over a PrefixRegistry.

    Paths are expected in the registry's separator convention already
    (e.g. 'Foo\\Bar\\Baz.php'); UriResourceLocator does that translation
    for 'scheme:///Foo/Bar/Baz.php' style URIs.
    """

    def __init__(self, registry: PrefixRegistry, context: LocatorContext | None = None):
        self.registry = registry
        self.context = context or registry.context

    @property
    def separator(self) -> str:
        # Lookups must split paths the same way the registry normalized its prefixes.
        return self.registry.separator

    def find_resource(self, normalized_path: str) -> Optional[str]:
        return match_path(
            normalized_path, self.registry, self.separator, MatchMode.FIRST_MATCH, context=self.context
        )

    def find_resource_variants(self, normalized_path: str) -> List[str]:
        return match_path(
            normalized_path, self.registry, self.separator, MatchMode.ALL_MATCHES, context=self.context
        )

    def find_namespaced_resource(self, namespaced_resource: str) -> Optional[str]:
        """
        Plain namespaced lookup with no URI scheme involved, e.g.
        'Foo\\Bar\\Baz.php'.
        """
        return self.find_resource(namespaced_resource)


class UriResourceLocator:
    """
    Dispatches 'scheme:///path' URIs to the handler registered for the scheme.

    Unknown schemes are not an error: they resolve to no match, with a warning.
    """

    def __init__(self, context: LocatorContext | None = None):
        self.context = context or LocatorContext.default()
        self._handlers: Dict[str, SchemeHandler] = {}

    def register_scheme(self, scheme: str, handler: SchemeHandler) -> None:
        if not scheme:
            raise LocatorError("[URI-0020] scheme name must not be empty")
        self._handlers[scheme] = handler
        log_debug(self.context, f"Registered handler for scheme '{scheme}'")

    def schemes(self) -> List[str]:
        return list(self._handlers.keys())

    @staticmethod
    def split_uri(uri: str) -> Tuple[str, str]:
        """Split 'classpath:///Foo/Bar' into ('classpath', 'Foo/Bar')."""
        index = uri.find(URI_MARKER)
        if index < 0:
            raise LocatorError(f"[URI-0010] malformed resource URI '{uri}': expected 'scheme{URI_MARKER}path'")
        return uri[:index], uri[index + len(URI_MARKER):]

    @classmethod
    def parse_uri(cls, uri: str, separator: str = "\\") -> Tuple[str, str]:
        """
        Split 'classpath:///Foo/Bar/Baz.php' into
        ('classpath', 'Foo\\Bar\\Baz.php') for separator '\\'.
        """
        scheme, path = cls.split_uri(uri)
        return scheme, cls.translate_path(path, separator)

    @staticmethod
    def translate_path(path: str, separator: str) -> str:
        """URI paths use '/'; handlers expect their own separator."""
        return path.replace("/", separator)

    def _dispatch(self, uri: str) -> Tuple[Optional[SchemeHandler], str]:
        scheme, path = self.split_uri(uri)
        handler = self._handlers.get(scheme)
        if handler is None:
            log_warning(self.context, f"[URI-0030] no handler registered for scheme '{scheme}' in '{uri}'")
            return None, path
        return handler, self.translate_path(path, handler.separator)

    def find_resource(self, uri: str) -> Optional[str]:
        handler, path = self._dispatch(uri)
        if handler is None:
            return None
        return handler.find_resource(path)

    def find_resource_variants(self, uri: str) -> List[str]:
        handler, path = self._dispatch(uri)
        if handler is None:
            return []
        return handler.find_resource_variants(path)


def classpath_locator(registry: PrefixRegistry, context: LocatorContext | None = None) -> UriResourceLocator:
    """A UriResourceLocator answering 'classpath:///' URIs from registry."""
    uri_locator = UriResourceLocator(context=context or registry.context)
    uri_locator.register_scheme(CLASSPATH_SCHEME, ResourceLocator(registry, context=context))
    return uri_locator
