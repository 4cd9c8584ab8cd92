"""Settings manager for settings.yaml files.

Manages three-scope settings system:
- User global (~/.classloader/settings.yaml)
- Project (.classloader/settings.yaml)
- Local (.classloader/settings.local.yaml)

Example settings.yaml:

    namespaces:
      App: /srv/app/lib
      Vendor: /srv/vendor
    loader:
      extension: py
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml

from .config import LoaderConfig
from .config import parse_loader_config

logger = logging.getLogger(__name__)

ScopeType = Literal["local", "project", "global"]


class ScopeNotAvailableError(Exception):
    """Raised when a requested scope is not available."""

    def __init__(self, scope: ScopeType, message: str):
        self.scope = scope
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class SettingsPaths:
    """Settings file locations; project/local are None when disabled."""

    user: Path
    project: Path | None = None
    local: Path | None = None


class SettingsManager:
    """Manages settings across user/project/local scopes."""

    def __init__(self, paths: SettingsPaths):
        """Initialize settings manager.

        Args:
            paths: Settings file locations
        """
        self.paths = paths

    def _scope_files(self) -> list[Path]:
        """Settings files in merge order (lowest priority first)."""
        return [path for path in (self.paths.user, self.paths.project, self.paths.local) if path is not None]

    def _file_for_scope(self, scope: ScopeType) -> Path:
        file_map: dict[str, Path | None] = {
            "global": self.paths.user,
            "project": self.paths.project,
            "local": self.paths.local,
        }
        target = file_map.get(scope)
        if target is None:
            raise ScopeNotAvailableError(
                scope,
                f"The '{scope}' scope is not available when running from your home directory.\n"
                f"Use --global instead to save to {self.paths.user}",
            )
        return target

    def get_namespaces(self) -> dict[str, str]:
        """Get namespace directories merged from all settings.

        Returns:
            Dict of namespace -> directory, later scopes overriding earlier ones
        """
        namespaces: dict[str, str] = {}

        for path in self._scope_files():
            settings = self._read_settings(path)
            if not settings or not settings.get("namespaces"):
                continue

            section = settings["namespaces"]
            if not isinstance(section, dict):
                logger.warning(f"Ignoring 'namespaces' in {path}: expected a mapping")
                continue

            for namespace, directory in section.items():
                if not isinstance(directory, str):
                    logger.warning(f"Ignoring namespace {namespace!r} in {path}: directory must be a string")
                    continue
                namespaces[str(namespace)] = directory

        return namespaces

    def add_namespace(self, namespace: str, directory: str, scope: ScopeType = "project") -> Path:
        """Add namespace directory to a settings scope.

        Returns:
            Settings file that was written
        """
        target_file = self._file_for_scope(scope)
        self._update_settings(target_file, {"namespaces": {namespace: directory}})
        logger.info(f"Added {scope} namespace {namespace}: {directory}")
        return target_file

    def remove_namespace(self, namespace: str, scope: ScopeType = "project") -> bool:
        """Remove namespace directory from a settings scope.

        Returns:
            True if removed, False if not found
        """
        target_file = self._file_for_scope(scope)
        settings = self._read_settings(target_file)

        if not settings or not isinstance(settings.get("namespaces"), dict):
            return False
        if namespace not in settings["namespaces"]:
            return False

        del settings["namespaces"][namespace]

        # Clean up empty namespaces section
        if not settings["namespaces"]:
            del settings["namespaces"]

        self._write_settings(target_file, settings)
        logger.info(f"Removed {scope} namespace {namespace}")
        return True

    def get_loader_config(self) -> LoaderConfig:
        """Get loader conventions merged from all settings.

        Raises:
            ConfigError: Merged loader section is invalid
        """
        return parse_loader_config(self.get_merged_settings().get("loader"))

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings
        3. Local settings
        """
        merged: dict[str, Any] = {}
        for path in self._scope_files():
            settings = self._read_settings(path)
            if settings:
                merged = self._deep_merge(merged, settings)
        return merged

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Returns:
            Settings dict or None if file doesn't exist or can't be read
        """
        if not path.exists():
            return None

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {path}: top level must be a mapping")
            return None
        return data

    def _write_settings(self, path: Path, settings: dict[str, Any]) -> None:
        """Write settings to YAML file."""
        # Ensure directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, "w") as f:
                yaml.dump(settings, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error(f"Failed to write settings to {path}: {e}")
            raise

    def _update_settings(self, path: Path, updates: dict[str, Any]) -> None:
        """Update settings file with new values (deep merge)."""
        existing = self._read_settings(path) or {}
        merged = self._deep_merge(existing, updates)
        self._write_settings(path, merged)

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries (overlay takes precedence)."""
        result = base.copy()

        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
