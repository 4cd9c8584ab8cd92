"""Shared helpers for the classloader CLI."""
