"""Resolution commands: show where an identifier resolves and load it."""

from __future__ import annotations

import logging
import sys

import click

from ..config import ConfigError
from ..console import console
from ..paths import create_resolver
from ..resolver import ResolutionFailure
from ..resolver import Resolver
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message

logger = logging.getLogger(__name__)

FAILURE_HINTS = {
    ResolutionFailure.MALFORMED_IDENTIFIER: "identifier is empty or has an empty segment",
    ResolutionFailure.NO_NAMESPACE: "identifier has no namespace",
    ResolutionFailure.UNREGISTERED_NAMESPACE: "top-level namespace is not registered",
}


def _create_resolver_or_exit() -> Resolver:
    try:
        return create_resolver()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape_markup(e)}")
        sys.exit(1)


@click.command("resolve")
@click.argument("identifier")
def resolve_cmd(identifier: str):
    """Show the source file IDENTIFIER resolves to.

    Exits with status 1 when the identifier cannot be resolved.

    Examples:

        \b
        classloader resolve App.Model.User
        classloader resolve App_Model_User
    """
    resolver = _create_resolver_or_exit()
    path, failure = resolver.resolve_with_reason(identifier)

    if path is None:
        hint = FAILURE_HINTS[failure] if failure else "unknown reason"
        console.print(f"[yellow]Not resolvable:[/yellow] {escape_markup(identifier)} ({hint})", soft_wrap=True)
        sys.exit(1)

    console.print(escape_markup(path), soft_wrap=True, highlight=False)
    if not resolver.exists(path):
        console.print("[dim](file does not exist)[/dim]")


@click.command("load")
@click.argument("identifier")
def load_cmd(identifier: str):
    """Resolve IDENTIFIER and execute its source file.

    Exits with status 1 when nothing was loaded.
    """
    resolver = _create_resolver_or_exit()

    try:
        loaded = resolver.load_if_present(identifier)
    except Exception as e:
        logger.error(f"Loading {identifier} failed", exc_info=True)
        console.print(
            f"[red]Error loading {escape_markup(identifier)}:[/red] {escape_markup(format_error_message(e))}",
            soft_wrap=True,
        )
        sys.exit(1)

    if not loaded:
        console.print(f"[yellow]Nothing loaded for {escape_markup(identifier)}[/yellow]", soft_wrap=True)
        sys.exit(1)

    console.print(f"[green]✓ Loaded {escape_markup(identifier)}[/green]", soft_wrap=True)
