"""Convert command - rewrite between project and user identifiers."""

import warnings

import click

from ... import legacy
from ...context import EnvironmentProjectContext
from ...errors import NriParseError
from ...parser import parse_nri
from ..helpers import fail, pass_context, require_settings


@click.command()
@click.argument("raw")
@click.option(
    "--to",
    "target",
    type=click.Choice(["absolute", "relative"]),
    required=True,
    help="absolute: nprs:: → nurs::, relative: nurs:: → nprs::",
)
@pass_context
def convert(ctx, raw, target):
    """Rewrite RAW against the project root.

    Identifiers that do not apply (wrong scheme, outside the project) are
    printed unchanged.

    Examples:
        nri --project /work/album convert nprs::images/cover.png --to absolute
        nri --project /work/album convert nurs::/work/album/a.png --to relative
    """
    project = ctx.project or EnvironmentProjectContext(
        require_settings()
    ).current_project_root()
    if not project:
        fail("No project root; pass --project or set NRI_PROJECT_ROOT")

    try:
        nri = parse_nri(raw)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            if target == "absolute":
                converted = legacy.to_absolute(nri, project)
            else:
                converted = legacy.to_project_relative(nri, project)
    except NriParseError as e:
        fail(str(e))

    click.echo(converted.nri_string)
