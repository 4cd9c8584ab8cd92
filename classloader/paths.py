"""Path policy and dependency injection helpers.

Centralizes where settings live and how a fully wired Resolver is built.
Library classes receive their collaborators via injection; this module
provides the application's choices.
"""

from pathlib import Path

from .hooks import ImportHook
from .registry import NamespaceRegistry
from .resolver import Resolver
from .settings import ScopeNotAvailableError
from .settings import ScopeType
from .settings import SettingsManager
from .settings import SettingsPaths

SETTINGS_DIR = ".classloader"


def is_running_from_home() -> bool:
    """Check if running from the home directory."""
    return Path.cwd() == Path.home()


def get_settings_paths() -> SettingsPaths:
    """Get settings file locations.

    Returns:
        SettingsPaths with conventions:
        - User: ~/.classloader/settings.yaml (always enabled)
        - Project: .classloader/settings.yaml (disabled when cwd is home)
        - Local: .classloader/settings.local.yaml (disabled when cwd is home)
    """
    user = Path.home() / SETTINGS_DIR / "settings.yaml"

    # When cwd is home directory, project/local would alias the user file
    if is_running_from_home():
        return SettingsPaths(user=user)

    return SettingsPaths(
        user=user,
        project=Path(SETTINGS_DIR) / "settings.yaml",
        local=Path(SETTINGS_DIR) / "settings.local.yaml",
    )


def create_settings_manager() -> SettingsManager:
    """Create settings manager with the default path policy."""
    return SettingsManager(get_settings_paths())


def create_resolver(settings: SettingsManager | None = None) -> Resolver:
    """Create resolver with registry, conventions and import hook from settings.

    The resolver is not attached to the runtime; callers decide when to call
    attach_to_runtime().

    Raises:
        ConfigError: Loader settings are invalid
    """
    settings = settings or create_settings_manager()
    config = settings.get_loader_config()

    registry = NamespaceRegistry()
    for namespace, directory in settings.get_namespaces().items():
        registry.register(namespace, directory)

    hook = ImportHook(separator=config.separator)
    resolver = Resolver(registry, config, hook=hook)
    hook.package_probe = resolver.is_namespace_present
    return resolver


def validate_scope_for_write(
    scope: ScopeType,
    settings: SettingsManager,
    *,
    allow_fallback: bool = False,
) -> ScopeType:
    """Validate that a scope is available for write operations.

    Args:
        scope: The requested scope ("local", "project", or "global")
        settings: SettingsManager whose paths are checked
        allow_fallback: If True, fall back to "global" when scope unavailable

    Returns:
        The validated scope (may be "global" if fallback allowed)

    Raises:
        ScopeNotAvailableError: If scope is not available and fallback not allowed
    """
    available = {
        "global": settings.paths.user,
        "project": settings.paths.project,
        "local": settings.paths.local,
    }
    if available[scope] is not None:
        return scope

    if allow_fallback:
        return "global"

    raise ScopeNotAvailableError(
        scope,
        f"The '{scope}' scope is not available when running from your home directory.\n"
        f"Use --global instead to save to ~/{SETTINGS_DIR}/settings.yaml\n\n"
        f"Tip: Project and local scopes require being in a project directory.",
    )


def get_effective_scope(
    requested_scope: ScopeType | None,
    settings: SettingsManager,
    *,
    default_scope: ScopeType = "project",
) -> tuple[ScopeType, bool]:
    """Get the effective scope, handling fallbacks gracefully.

    Returns:
        Tuple of (effective_scope, was_fallback_used)

    Raises:
        ScopeNotAvailableError: If an explicitly requested scope is not available
    """
    if requested_scope is not None:
        return validate_scope_for_write(requested_scope, settings, allow_fallback=False), False

    effective = validate_scope_for_write(default_scope, settings, allow_fallback=True)
    return effective, effective != default_scope
