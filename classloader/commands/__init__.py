"""CLI command groups for classloader."""

__all__ = [
    "namespace",
    "resolve",
]
