"""Namespace-to-path class loader.

Register top-level namespaces to base directories and resolve fully
qualified identifiers to source files below them:

    from classloader import ImportHook, Resolver

    resolver = Resolver(hook=ImportHook())
    resolver.register("App", "/srv/app/lib")
    resolver.resolve("App.Model.User")   # "/srv/app/lib/App/Model/User.py"
    resolver.attach_to_runtime()         # import App_Model_User now loads it
"""

from .config import ConfigError
from .config import LoaderConfig
from .hooks import ImportHook
from .hooks import SymbolResolutionHook
from .identifiers import QualifiedName
from .identifiers import parse_identifier
from .registry import NamespaceRegistry
from .resolver import ResolutionFailure
from .resolver import Resolver
from .sources import load_source_file

__all__ = [
    "ConfigError",
    "ImportHook",
    "LoaderConfig",
    "NamespaceRegistry",
    "QualifiedName",
    "ResolutionFailure",
    "Resolver",
    "SymbolResolutionHook",
    "load_source_file",
    "parse_identifier",
]
