"""Error taxonomy for identifier parsing, access, and resolution."""

from typing import Optional


class NriError(ValueError):
    """Base class for all Nri errors.

    Attributes:
        value: The offending input (raw string, key, or identifier text)
    """

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class NriParseError(NriError):
    """Raw text could not be parsed into an Nri."""

    pass


class EmptyInputError(NriParseError):
    """Input string is empty."""

    pass


class MissingSchemeDelimiterError(NriParseError):
    """Input has no '::' separator."""

    pass


class AmbiguousSchemeDelimiterError(NriParseError):
    """Input has more than one '::' separator."""

    pass


class UnknownSchemeError(NriParseError):
    """Scheme token is not one of the registered schemes."""

    pass


class EmptyPathError(NriParseError):
    """Input has a scheme but no path segments."""

    pass


class QueryKeyNotFoundError(NriError, KeyError):
    """Requested query key does not exist on the identifier."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidQueryValueError(NriError):
    """Query value could not be converted to the requested type."""

    pass


class InvalidSchemeError(NriError):
    """Identifier has the wrong scheme for the requested view."""

    pass


class NriResolutionError(NriError):
    """Identifier could not be resolved to a resource reference."""

    pass


class PackageResourceMalformedError(NriResolutionError):
    """Package identifier lacks a package name or asset path."""

    pass


class MissingProjectContextError(NriResolutionError):
    """Project identifier resolved with no project root available."""

    pass


__all__ = [
    "AmbiguousSchemeDelimiterError",
    "EmptyInputError",
    "EmptyPathError",
    "InvalidQueryValueError",
    "InvalidSchemeError",
    "MissingProjectContextError",
    "MissingSchemeDelimiterError",
    "NriError",
    "NriParseError",
    "NriResolutionError",
    "PackageResourceMalformedError",
    "QueryKeyNotFoundError",
    "UnknownSchemeError",
]
