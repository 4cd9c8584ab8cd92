"""Filesystem collaborators for the resolver.

The resolver only computes candidate paths. Checking that a candidate exists
and executing it are injected collaborators; these are the defaults.
"""

import importlib.machinery
import importlib.util
import logging
import os
import sys
from types import ModuleType

logger = logging.getLogger(__name__)


def file_exists(path: str) -> bool:
    """Default existence predicate for candidate source files."""
    return os.path.isfile(path)


def directory_exists(path: str) -> bool:
    """Default existence predicate for namespace directories."""
    return os.path.isdir(path)


def load_source_file(path: str, module_name: str) -> ModuleType:
    """Execute a source file as a module and register it in sys.modules.

    The file is loaded with a SourceFileLoader regardless of its extension.
    A module whose execution fails is removed from sys.modules again and the
    original exception is re-raised.

    Args:
        path: Path to the source file
        module_name: Dotted name to register the module under

    Returns:
        The executed module

    Raises:
        ImportError: No module spec could be built for the path
    """
    loader = importlib.machinery.SourceFileLoader(module_name, path)
    spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
    if spec is None:
        raise ImportError(f"Cannot build module spec for {path}", name=module_name, path=path)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise

    logger.debug(f"[classloader:load] {module_name} <- {path}")
    return module
