"""Runtime hook integration.

A SymbolResolutionHook lets a host wire symbol handlers into the runtime's
fallback resolution. ImportHook is the Python implementation: a finder
appended to sys.meta_path, so it is only consulted for imports that every
standard finder has already given up on.
"""

from __future__ import annotations

import importlib.abc
import importlib.machinery
import importlib.util
import logging
import sys
import threading
from collections.abc import Callable
from types import ModuleType
from typing import Protocol

logger = logging.getLogger(__name__)

SymbolHandler = Callable[[str], bool]


class SymbolResolutionHook(Protocol):
    """Runtime fallback chain for unresolved symbols."""

    def attach(self, handler: SymbolHandler) -> bool:
        """Add a handler. Returns False if it was already attached."""
        ...

    def detach(self, handler: SymbolHandler) -> bool:
        """Remove a handler. Returns False if it was not attached."""
        ...


class _LoadedModuleLoader(importlib.abc.Loader):
    """Loader that hands back a module a handler already executed."""

    def __init__(self, module: ModuleType):
        self.module = module

    def create_module(self, spec):
        return self.module

    def exec_module(self, module):
        pass


class ImportHook(importlib.abc.MetaPathFinder):
    """sys.meta_path finder that offers unresolved imports to handlers.

    Dotted import names are converted to identifiers with `separator` before
    being passed to the handlers. When no handler loads the name and the
    optional `package_probe` accepts it, an empty namespace package is
    returned so that imports of its children come back through this hook.
    """

    def __init__(
        self,
        separator: str = ".",
        package_probe: Callable[[str], bool] | None = None,
        meta_path: list | None = None,
    ):
        """Initialize hook.

        Args:
            separator: Hierarchy separator handlers expect in identifiers
            package_probe: Optional predicate for identifiers that name a namespace
            meta_path: Finder list to install into (defaults to sys.meta_path)
        """
        self.separator = separator
        self.package_probe = package_probe
        self.meta_path = sys.meta_path if meta_path is None else meta_path
        self._handlers: list[SymbolHandler] = []
        self._lock = threading.Lock()

    @property
    def handlers(self) -> list[SymbolHandler]:
        with self._lock:
            return list(self._handlers)

    @property
    def installed(self) -> bool:
        return self in self.meta_path

    def attach(self, handler: SymbolHandler) -> bool:
        with self._lock:
            if handler in self._handlers:
                return False
            self._handlers.append(handler)
            if self not in self.meta_path:
                self.meta_path.append(self)
                logger.debug("[classloader:hook] installed on meta path")
        logger.debug(f"[classloader:hook] attached {handler!r}")
        return True

    def detach(self, handler: SymbolHandler) -> bool:
        with self._lock:
            if handler not in self._handlers:
                return False
            self._handlers.remove(handler)
            if not self._handlers and self in self.meta_path:
                self.meta_path.remove(self)
                logger.debug("[classloader:hook] removed from meta path")
        logger.debug(f"[classloader:hook] detached {handler!r}")
        return True

    def to_identifier(self, fullname: str) -> str:
        return fullname.replace(".", self.separator)

    def find_spec(self, fullname, path=None, target=None):
        # The identifier would not map back to fullname, so the loaded module
        # would land under a different name
        if self.separator != "." and self.separator in fullname:
            logger.debug(f"[classloader:hook] {fullname} contains separator {self.separator!r}, skipped")
            return None

        identifier = self.to_identifier(fullname)

        for handler in self.handlers:
            if not handler(identifier):
                continue
            module = sys.modules.get(fullname)
            if module is None:
                logger.warning(
                    f"[classloader:hook] {handler!r} already executed a source file for {identifier} "
                    f"but registered no module {fullname}"
                )
                continue
            logger.debug(f"[classloader:hook] {fullname} -> loaded")
            spec = importlib.util.spec_from_loader(
                fullname,
                _LoadedModuleLoader(module),
                origin=getattr(module, "__file__", None),
            )
            # The import system prefers the __spec__ of a module already in
            # sys.modules; it must not point at a loader that executes again.
            module.__spec__ = spec
            return spec

        if self.package_probe is not None and self.package_probe(identifier):
            logger.debug(f"[classloader:hook] {fullname} -> namespace package")
            return importlib.machinery.ModuleSpec(fullname, None, is_package=True)

        return None

    def __repr__(self) -> str:
        return f"ImportHook({len(self._handlers)} handlers)"
