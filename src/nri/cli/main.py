"""Nri CLI main entry point with global options."""

import logging

import click

from .helpers import NriContext


@click.group()
@click.option(
    "--project",
    type=click.Path(),
    help="Project root for nprs:: identifiers (overrides $NRI_PROJECT_ROOT)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log resolution steps to stderr")
@click.pass_context
def cli(ctx, project, verbose):
    """Nri - parse and resolve resource identifiers."""
    ctx.ensure_object(NriContext)
    ctx.obj.project = project
    ctx.obj.verbose = verbose

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Register commands at module level so tests can import cli with commands attached
from .commands.convert import convert
from .commands.parse import parse
from .commands.path import path
from .commands.resolve import resolve

cli.add_command(parse)
cli.add_command(resolve)
cli.add_command(path)
cli.add_command(convert)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
