"""Nri parsing.

This module implements parsing for the identifier syntax:
    scheme::path[?query]

Where:
    - scheme: One of the registered scheme tokens (nars, npkrs, nurs, uri, nprs)
    - path: Segments separated by /, kept exactly as written
    - ?query: Optional key=value or flag entries separated by &
"""

import logging
from typing import Optional

from .errors import (
    AmbiguousSchemeDelimiterError,
    EmptyInputError,
    EmptyPathError,
    MissingSchemeDelimiterError,
    NriParseError,
    UnknownSchemeError,
)
from .query import parse_query_string
from .schemes import SCHEME_TOKENS, classify, is_valid_scheme
from .types import Nri

logger = logging.getLogger(__name__)

SCHEME_DELIMITER = "::"


def parse_nri(raw: str) -> Nri:
    """Parse scheme::path[?query] syntax.

    Args:
        raw: Raw identifier string

    Returns:
        Parsed Nri

    Examples:
        >>> parse_nri("nars::assets/a.png")
        Nri('nars::assets/a.png')

        >>> parse_nri("nurs::img.png?scale=2.0&flag").query_dict()
        {'scale': '2.0', 'flag': None}

    Raises:
        EmptyInputError: If raw is empty
        MissingSchemeDelimiterError: If raw has no '::'
        AmbiguousSchemeDelimiterError: If raw has more than one '::'
        UnknownSchemeError: If the scheme token is not registered
    """
    if not raw:
        raise EmptyInputError("Nri cannot be empty", raw)

    if SCHEME_DELIMITER not in raw:
        raise MissingSchemeDelimiterError(f"Nri has no valid scheme: {raw}", raw)

    parts = raw.split(SCHEME_DELIMITER)
    if len(parts) > 2:
        raise AmbiguousSchemeDelimiterError(
            f"Nri has multiple '{SCHEME_DELIMITER}': {raw}", raw
        )

    token, rest = parts
    if not is_valid_scheme(token):
        raise UnknownSchemeError(
            f"{token!r} is not a valid scheme in {raw} "
            f"(expected one of: {', '.join(SCHEME_TOKENS)})",
            raw,
        )

    path_part, has_query, query_part = rest.partition("?")

    segments = path_part.split("/")
    # Unreachable: str.split always yields at least one element
    if not segments:
        raise EmptyPathError(f"Nri has no path: {raw}", raw)

    queries = parse_query_string(query_part) if has_query else ()

    return Nri(classify(token), tuple(segments), queries)


def try_parse(raw: Optional[str]) -> Optional[Nri]:
    """Parse ``raw``, returning None instead of raising.

    None and empty strings return None without logging.
    """
    if not raw:
        return None
    try:
        return parse_nri(raw)
    except NriParseError as e:
        logger.debug("Ignoring unparsable nri %r: %s", raw, e)
        return None


__all__ = ["SCHEME_DELIMITER", "parse_nri", "try_parse"]
