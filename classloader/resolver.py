"""Namespace-to-path resolver.

Turns a qualified identifier into the candidate source file below the
directory registered for its top-level namespace:

    registry.register("App", "/srv/lib")
    resolver.resolve("App.Model.User")      # "/srv/lib/App/Model/User.py"
    resolver.resolve("App_Model_User")      # "/srv/lib/App/Model/User.py"
    resolver.resolve("App.Sub_Name.Class_Name")
                                            # "/srv/lib/App/Sub_Name/Class/Name.py"

Only the final segment of a hierarchical identifier has its legacy separators
converted into directories; intermediate segments are kept verbatim.

Misses are expected (several resolvers may be chained by the runtime) and are
always reported as None/False, never raised.
"""

import logging
from collections.abc import Callable
from enum import Enum

from .config import LoaderConfig
from .hooks import SymbolResolutionHook
from .identifiers import QualifiedName
from .identifiers import parse_identifier
from .registry import NamespaceRegistry
from .sources import directory_exists
from .sources import file_exists
from .sources import load_source_file

logger = logging.getLogger(__name__)


class ResolutionFailure(str, Enum):
    """Why an identifier could not be resolved."""

    MALFORMED_IDENTIFIER = "malformed_identifier"
    NO_NAMESPACE = "no_namespace"
    UNREGISTERED_NAMESPACE = "unregistered_namespace"


class Resolver:
    """Resolve qualified identifiers to source files and load them."""

    def __init__(
        self,
        registry: NamespaceRegistry | None = None,
        config: LoaderConfig | None = None,
        *,
        exists: Callable[[str], bool] = file_exists,
        is_dir: Callable[[str], bool] = directory_exists,
        loader: Callable[[str, str], object] = load_source_file,
        hook: SymbolResolutionHook | None = None,
    ):
        """Initialize resolver.

        Args:
            registry: Namespace registry (a new empty one if None)
            config: Naming and file conventions (defaults if None)
            exists: Predicate telling whether a candidate file exists
            is_dir: Predicate telling whether a namespace directory exists
            loader: Called as loader(path, module_name) to load a source file
            hook: Runtime hook used by attach_to_runtime/detach_from_runtime
        """
        self.registry = registry if registry is not None else NamespaceRegistry()
        self.config = config or LoaderConfig()
        self.exists = exists
        self.is_dir = is_dir
        self.loader = loader
        self.hook = hook

    def register(self, namespace: str, directory: str) -> None:
        """Register a top-level namespace directory (see NamespaceRegistry.register)."""
        self.registry.register(namespace, directory)

    def list_all(self) -> list[tuple[str, str]]:
        """All registered (namespace, directory) pairs."""
        return self.registry.list_all()

    def parse(self, identifier: str | None) -> QualifiedName | None:
        """Parse identifier with this resolver's separators (None if malformed)."""
        return parse_identifier(identifier, self.config.separator, self.config.legacy_separator)

    def resolve(self, identifier: str | None) -> str | None:
        """Resolve identifier to its candidate source path.

        The filesystem is not consulted.

        Returns:
            Candidate path, or None if the identifier cannot be resolved
        """
        path, _failure = self.resolve_with_reason(identifier)
        return path

    def resolve_with_reason(self, identifier: str | None) -> tuple[str | None, ResolutionFailure | None]:
        """Resolve identifier and report why resolution failed.

        Returns:
            Tuple of (path, failure); exactly one of the two is None
        """
        name = self.parse(identifier)
        if name is None:
            logger.debug(f"[classloader:resolve] {identifier!r} -> malformed")
            return None, ResolutionFailure.MALFORMED_IDENTIFIER

        if name.top_level is None:
            logger.debug(f"[classloader:resolve] {identifier!r} -> no namespace")
            return None, ResolutionFailure.NO_NAMESPACE

        directory = self.registry.lookup(name.top_level)
        if directory is None:
            logger.debug(f"[classloader:resolve] {identifier!r} -> unregistered namespace {name.top_level}")
            return None, ResolutionFailure.UNREGISTERED_NAMESPACE

        path = self._build_path(directory, name)
        logger.debug(f"[classloader:resolve] {identifier!r} -> {path}")
        return path, None

    def _build_path(self, directory: str, name: QualifiedName) -> str:
        simple_name = name.simple_name
        if self.config.legacy_separator:
            simple_name = simple_name.replace(self.config.legacy_separator, "/")
        namespace_path = "/".join(name.segments)
        return f"{directory}/{namespace_path}/{simple_name}.{self.config.extension}"

    def load_if_present(self, identifier: str | None) -> bool:
        """Resolve identifier and load its source file if it exists.

        Errors raised by the loader itself propagate unchanged.

        Returns:
            True if the file was found and the loader reported success
        """
        path = self.resolve(identifier)
        if path is None:
            return False

        if not self.exists(path):
            logger.debug(f"[classloader:load] {identifier!r} -> {path} does not exist")
            return False

        # resolve() succeeded, so the identifier parses
        name = self.parse(identifier)
        return bool(self.loader(path, name.module_name))

    def namespace_directory(self, identifier: str | None) -> str | None:
        """Directory a namespace identifier maps to, without checking it exists.

        Identifiers are taken as namespaces here, so the top-level namespace
        alone ("App") is accepted and legacy rewriting does not apply.
        """
        name = parse_identifier(identifier, self.config.separator, legacy_separator=None)
        if name is None:
            return None

        segments = (*name.segments, name.simple_name)
        directory = self.registry.lookup(segments[0])
        if directory is None:
            return None
        return f"{directory}/{'/'.join(segments)}"

    def is_namespace_present(self, identifier: str | None) -> bool:
        """Check whether identifier names an existing namespace directory."""
        directory = self.namespace_directory(identifier)
        return directory is not None and self.is_dir(directory)

    def attach_to_runtime(self) -> bool:
        """Attach load_if_present to the runtime hook.

        Returns:
            True if attached, False without a hook or if already attached
        """
        if self.hook is None:
            logger.debug("[classloader:hook] no runtime hook configured, not attaching")
            return False
        return self.hook.attach(self.load_if_present)

    def detach_from_runtime(self) -> bool:
        """Detach load_if_present from the runtime hook.

        Returns:
            True if detached, False without a hook or if not attached
        """
        if self.hook is None:
            return False
        return self.hook.detach(self.load_if_present)

    def __repr__(self) -> str:
        return f"Resolver({self.registry!r}, extension={self.config.extension!r})"
