"""classloader CLI - manage namespace directories and resolve identifiers."""

import logging

import click

from .commands.namespace import namespace as namespace_group
from .commands.resolve import load_cmd
from .commands.resolve import resolve_cmd
from .logging_setup import init_json_logging

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(package_name="classloader")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for the JSONL log (default: $CLASSLOADER_LOG_LEVEL or WARNING)",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="JSONL log file (default: $CLASSLOADER_LOG_PATH or ./classloader.log.jsonl)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_file: str | None):
    """classloader - load classes from registered namespace directories."""
    init_json_logging(log_file, log_level)
    logger.debug(f"classloader invoked: {ctx.invoked_subcommand}")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


cli.add_command(namespace_group)
cli.add_command(resolve_cmd)
cli.add_command(load_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
