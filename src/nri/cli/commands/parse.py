"""Parse command - show the structure of an identifier."""

import click

from ...errors import NriParseError
from ...parser import parse_nri
from ..helpers import echo_json, fail


@click.command()
@click.argument("raw")
def parse(raw):
    """Parse RAW and print its scheme, segments and queries as JSON.

    Examples:
        nri parse nars::assets/logo.png
        nri parse "nurs::/photos/cat.jpg?scale=2&thumbnail=small"
    """
    try:
        nri = parse_nri(raw)
    except NriParseError as e:
        fail(str(e))

    echo_json(nri.to_dict())
