"""Scheme registry - the closed set of namespaces an Nri can address.

Tokens are part of the wire format and must never change:

    nars   application-bundled assets
    npkrs  package-bundled assets
    nurs   user filesystem files
    uri    network locations
    nprs   project-relative files
"""

from enum import Enum
from typing import Union

from .errors import UnknownSchemeError


class Scheme(str, Enum):
    """Registered Nri schemes, valued by their wire token."""

    APP = "nars"
    PACKAGE = "npkrs"
    USER = "nurs"
    NETWORK = "uri"
    PROJECT = "nprs"

    def __str__(self) -> str:
        return self.value


SCHEME_TOKENS = tuple(scheme.value for scheme in Scheme)

_BY_TOKEN = {scheme.value: scheme for scheme in Scheme}


def is_valid_scheme(token: str) -> bool:
    """Return True if ``token`` is a registered scheme token."""
    return token in _BY_TOKEN


def classify(token: Union[str, Scheme]) -> Scheme:
    """Map a scheme token to its Scheme member.

    Raises:
        UnknownSchemeError: If the token is not registered
    """
    if isinstance(token, Scheme):
        return token
    try:
        return _BY_TOKEN[token]
    except KeyError:
        raise UnknownSchemeError(
            f"{token!r} is not a valid scheme "
            f"(expected one of: {', '.join(SCHEME_TOKENS)})",
            token,
        ) from None


__all__ = ["SCHEME_TOKENS", "Scheme", "classify", "is_valid_scheme"]
