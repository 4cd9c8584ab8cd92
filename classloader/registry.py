"""Namespace directory registry.

Maps a top-level namespace (e.g. "App") to the base directory holding it.
Each namespace maps to exactly one directory; registering it again replaces
the directory (last write wins). There is no removal operation.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class NamespaceRegistry:
    """Registry of top-level namespace -> base directory."""

    def __init__(self):
        """Initialize empty registry."""
        self._directories: dict[str, str] = {}
        self._lock = threading.RLock()

    def register(self, namespace: str, directory: str) -> None:
        """Map a top-level namespace to a base directory.

        Empty (or non-string) arguments are ignored silently. The directory is
        stored as given, no separator normalization is performed.

        Args:
            namespace: Top-level namespace (e.g., "App")
            directory: Base directory containing the namespace tree
        """
        if not namespace or not directory:
            return
        if not isinstance(namespace, str) or not isinstance(directory, str):
            return

        with self._lock:
            previous = self._directories.get(namespace)
            self._directories[namespace] = directory

        if previous is not None and previous != directory:
            logger.debug(f"[classloader:register] {namespace} -> {directory} (was {previous})")
        else:
            logger.debug(f"[classloader:register] {namespace} -> {directory}")

    def lookup(self, namespace: str | None) -> str | None:
        """Get directory registered for an exact top-level namespace.

        Returns:
            Registered directory, or None if unregistered or namespace is empty
        """
        if not namespace:
            return None
        with self._lock:
            return self._directories.get(namespace)

    def list_all(self) -> list[tuple[str, str]]:
        """Snapshot of all (namespace, directory) pairs in registration order."""
        with self._lock:
            return list(self._directories.items())

    def __contains__(self, namespace: object) -> bool:
        with self._lock:
            return namespace in self._directories

    def __len__(self) -> int:
        with self._lock:
            return len(self._directories)

    def __repr__(self) -> str:
        return f"NamespaceRegistry({len(self)} namespaces)"
