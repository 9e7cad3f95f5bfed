"""Path command - filename parts of an identifier."""

import click

from ...errors import NriParseError
from ...parser import parse_nri
from ...paths import extension, filename, filename_without_extension
from ..helpers import echo_json, fail


@click.command()
@click.argument("raw")
def path(raw):
    """Print the path, filename, stem and extension of RAW as JSON.

    Examples:
        nri path nprs::images/cover.png
    """
    try:
        nri = parse_nri(raw)
    except NriParseError as e:
        fail(str(e))

    echo_json(
        {
            "path": nri.path,
            "filename": filename(nri),
            "stem": filename_without_extension(nri),
            "extension": extension(nri),
        }
    )
