"""Resolve command - map an identifier to a loadable location."""

import click

from ...errors import NriError
from ...thumbnails import ThumbnailSpec
from ..helpers import build_resolver, fail, pass_context


@click.command()
@click.argument("raw")
@click.option("--scale", type=float, help="Fallback scale if RAW has no scale query")
@click.option("--thumbnail", help="Fallback thumbnail variant if RAW requests none")
@pass_context
def resolve(ctx, raw, scale, thumbnail):
    """Resolve RAW and print the resolved resource as JSON.

    Project identifiers (nprs::) are rooted at --project, $NRI_PROJECT_ROOT,
    or the nearest parent directory containing a .nproj marker.

    Examples:
        nri resolve nars::assets/logo.png --scale 2
        nri --project /work/album resolve nprs::images/cover.png
        nri resolve "nurs::/photos/cat.jpg?thumbnail=small"
    """
    resolver = build_resolver(ctx.project)
    try:
        resolved = resolver.resolve_string(
            raw, scale=scale, thumbnail=ThumbnailSpec.try_parse(thumbnail)
        )
    except NriError as e:
        fail(str(e))

    click.echo(resolved.model_dump_json(indent=2))
