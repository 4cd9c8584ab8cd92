"""Namespace registration commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import cast

import click
from rich.table import Table

from ..config import ConfigError
from ..console import console
from ..paths import create_resolver
from ..paths import create_settings_manager
from ..paths import get_effective_scope
from ..settings import ScopeNotAvailableError
from ..settings import ScopeType
from ..utils.error_format import escape_markup

SCOPE_LABELS = {
    "local": "local (.classloader/settings.local.yaml)",
    "project": "project (.classloader/settings.yaml)",
    "global": "global (~/.classloader/settings.yaml)",
}


@click.group(invoke_without_command=True)
@click.pass_context
def namespace(ctx: click.Context):
    """Manage top-level namespace directories.

    Each top-level namespace maps to exactly one base directory. Classes in
    the namespace are loaded from <directory>/<Top>/<Sub>/<Name>.py.
    """
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@namespace.command("add")
@click.argument("name")
@click.argument("directory")
@click.option(
    "--local", "scope_flag", flag_value="local", help="Store in local settings (.classloader/settings.local.yaml)"
)
@click.option(
    "--project", "scope_flag", flag_value="project", help="Store in project settings (.classloader/settings.yaml)"
)
@click.option(
    "--global", "scope_flag", flag_value="global", help="Store in user settings (~/.classloader/settings.yaml)"
)
def namespace_add(name: str, directory: str, scope_flag: str | None):
    """Register DIRECTORY as the base directory of namespace NAME.

    Registering a namespace again replaces its directory.

    Examples:

        \b
        # Classes App.* are loaded from ./lib/App/...
        classloader namespace add App ./lib

        \b
        # Register for every project
        classloader namespace add Vendor ~/src/vendor --global
    """
    name = name.strip()
    if not name:
        raise click.BadParameter("namespace must not be empty", param_hint="NAME")

    settings = create_settings_manager()

    try:
        scope, was_fallback = get_effective_scope(cast(ScopeType, scope_flag) if scope_flag else None, settings)
    except ScopeNotAvailableError as e:
        console.print(f"[red]Error:[/red] {escape_markup(e.message)}")
        sys.exit(1)

    if was_fallback:
        console.print("[yellow]Note:[/yellow] Running from home directory, using global scope")

    directory_path = Path(directory).expanduser().resolve()
    if not directory_path.is_dir():
        console.print(f"[yellow]Warning:[/yellow] {escape_markup(directory_path)} is not a directory", soft_wrap=True)

    settings.add_namespace(name, str(directory_path), scope=scope)

    console.print(f"[green]✓ Registered namespace {escape_markup(name)}[/green]")
    console.print(f"  Directory: {escape_markup(directory_path)}", soft_wrap=True)
    console.print(f"  Scope: {SCOPE_LABELS[scope]}")


@namespace.command("remove")
@click.argument("name")
@click.option(
    "--local", "scope_flag", flag_value="local", help="Remove from local settings (.classloader/settings.local.yaml)"
)
@click.option(
    "--project", "scope_flag", flag_value="project", help="Remove from project settings (.classloader/settings.yaml)"
)
@click.option(
    "--global", "scope_flag", flag_value="global", help="Remove from user settings (~/.classloader/settings.yaml)"
)
def namespace_remove(name: str, scope_flag: str | None):
    """Remove namespace NAME from a settings file.

    Only the settings file changes; resolvers already running keep their
    registrations.
    """
    settings = create_settings_manager()

    try:
        scope, _ = get_effective_scope(cast(ScopeType, scope_flag) if scope_flag else None, settings)
    except ScopeNotAvailableError as e:
        console.print(f"[red]Error:[/red] {escape_markup(e.message)}")
        sys.exit(1)

    if settings.remove_namespace(name, scope=scope):
        console.print(f"[green]✓ Removed namespace {escape_markup(name)}[/green] from {SCOPE_LABELS[scope]}")
    else:
        console.print(f"[yellow]Namespace {escape_markup(name)} not found in {SCOPE_LABELS[scope]}[/yellow]")
        sys.exit(1)


@namespace.command("list")
def namespace_list():
    """List effective namespace registrations."""
    try:
        resolver = create_resolver()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape_markup(e)}")
        sys.exit(1)

    registrations = resolver.list_all()
    if not registrations:
        console.print("[yellow]No namespaces registered[/yellow]")
        console.print("[dim]Add one with: classloader namespace add <NAME> <DIRECTORY>[/dim]")
        return

    table = Table(title="Registered Namespaces", show_header=True, header_style="bold cyan")
    table.add_column("Namespace", style="green", no_wrap=True)
    table.add_column("Directory", overflow="fold")
    table.add_column("Exists")

    for name, directory in registrations:
        exists = "[green]yes[/green]" if resolver.is_dir(directory) else "[red]no[/red]"
        table.add_row(escape_markup(name), escape_markup(directory), exists)

    console.print(table)
