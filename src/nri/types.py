"""Nri value types."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, TypeVar, Union

from .errors import InvalidSchemeError, QueryKeyNotFoundError
from .query import QueryEntry, entries_from_mapping, format_query_string
from .schemes import Scheme, classify

T = TypeVar("T")

QueriesInput = Union[Iterable[QueryEntry], Mapping[str, Optional[str]]]


@dataclass(frozen=True, eq=False)
class Nri:
    """Immutable resource identifier.

    An Nri follows the syntax:
        scheme::segment/segment[?key=value&flag]

    Examples:
        "nars::assets/logo.png"            → app asset
        "npkrs::ui_kit/icons/close.png"    → asset bundled in package ui_kit
        "nurs::/home/me/photo.jpg"         → file on the user's filesystem
        "uri::https://example.com/a.png"   → network location
        "nprs::images/cover.png?scale=2"   → file relative to the open project

    Equality and hashing use the canonical string (``nri_string``), so two
    values built from different field data compare equal when they render
    identically, and query order matters.
    """

    scheme: Scheme
    """Namespace the identifier lives in."""

    segments: Tuple[str, ...] = ()
    """Path components. Empty components from doubled slashes are kept."""

    queries: Tuple[QueryEntry, ...] = field(default=())
    """Ordered query entries with unique keys."""

    def __post_init__(self):
        object.__setattr__(self, "scheme", classify(self.scheme))
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "queries", _normalize_queries(self.queries))

    # Construction

    @classmethod
    def parse(cls, raw: str) -> "Nri":
        from .parser import parse_nri

        return parse_nri(raw)

    @classmethod
    def try_parse(cls, raw: Optional[str]) -> Optional["Nri"]:
        from .parser import try_parse

        return try_parse(raw)

    @classmethod
    def app_resource(cls, path: str) -> "Nri":
        return cls.parse(f"{Scheme.APP.value}::{path}")

    @classmethod
    def package_resource(cls, path: str) -> "Nri":
        return cls.parse(f"{Scheme.PACKAGE.value}::{path}")

    @classmethod
    def user_resource(cls, path: str) -> "Nri":
        return cls.parse(f"{Scheme.USER.value}::{path}")

    @classmethod
    def network_resource(cls, path: str) -> "Nri":
        return cls.parse(f"{Scheme.NETWORK.value}::{path}")

    @classmethod
    def project_resource(cls, path: str) -> "Nri":
        return cls.parse(f"{Scheme.PROJECT.value}::{path}")

    # Rendering

    @property
    def path(self) -> str:
        return "/".join(self.segments)

    @property
    def query_string(self) -> str:
        """Query tail including the leading ``?``, or empty string."""
        return format_query_string(self.queries)

    @property
    def nri_string(self) -> str:
        """Canonical form: ``scheme::path?queries``."""
        return f"{self.scheme.value}::{self.nri_string_without_scheme}"

    @property
    def nri_string_without_scheme(self) -> str:
        return f"{self.path}{self.query_string}"

    def __str__(self) -> str:
        return self.nri_string

    def __repr__(self) -> str:
        return f"Nri({self.nri_string!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Nri):
            return NotImplemented
        return self.nri_string == other.nri_string

    def __hash__(self) -> int:
        return hash(self.nri_string)

    # Classification

    @property
    def is_app_resource(self) -> bool:
        return self.scheme == Scheme.APP

    @property
    def is_package_resource(self) -> bool:
        return self.scheme == Scheme.PACKAGE

    @property
    def is_user_resource(self) -> bool:
        return self.scheme == Scheme.USER

    @property
    def is_network_resource(self) -> bool:
        return self.scheme == Scheme.NETWORK

    @property
    def is_project_resource(self) -> bool:
        return self.scheme == Scheme.PROJECT

    # Queries

    def has_query(self, key: str) -> bool:
        return any(entry.key == key for entry in self.queries)

    def query_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Raw value for ``key``; ``default`` if absent. Flags return None."""
        for entry in self.queries:
            if entry.key == key:
                return entry.value
        return default

    def query_dict(self) -> Dict[str, Optional[str]]:
        return {entry.key: entry.value for entry in self.queries}

    def get_query_value(self, key: str, convert: Callable[[Optional[str]], T]) -> T:
        """Convert the value stored under ``key`` with ``convert``.

        ``convert`` receives None for flag-only entries.

        Examples:
            >>> Nri.parse("nurs::img.png?scale=2.0").get_query_value("scale", float)
            2.0

        Raises:
            QueryKeyNotFoundError: If ``key`` is not present
        """
        for entry in self.queries:
            if entry.key == key:
                return convert(entry.value)
        raise QueryKeyNotFoundError(
            f"Query key {key!r} does not exist in {self.nri_string}", key
        )

    # Path helpers

    @property
    def filename(self) -> str:
        from .paths import filename

        return filename(self.path)

    @property
    def filename_without_extension(self) -> str:
        from .paths import filename_without_extension

        return filename_without_extension(self.path)

    @property
    def extension(self) -> str:
        from .paths import extension

        return extension(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for JSON output."""
        return {
            "nri": self.nri_string,
            "scheme": self.scheme.value,
            "segments": list(self.segments),
            "queries": [
                {"key": entry.key, "value": entry.value} for entry in self.queries
            ],
        }


@dataclass(frozen=True)
class PackageNri:
    """Package-scheme view splitting the package name from the asset path.

    Examples:
        "npkrs::ui_kit/icons/close.png" → package="ui_kit", path="icons/close.png"
    """

    nri: Nri

    def __post_init__(self):
        if not self.nri.is_package_resource:
            raise InvalidSchemeError(
                f"{self.nri.nri_string} does not have the package resource "
                f"scheme ({Scheme.PACKAGE.value})",
                self.nri.nri_string,
            )

    @classmethod
    def from_nri(cls, nri: Nri) -> "PackageNri":
        return cls(nri)

    @property
    def package(self) -> Optional[str]:
        return self.nri.segments[0] if self.nri.segments else None

    @property
    def path(self) -> str:
        return "/".join(self.nri.segments[1:])


def _normalize_queries(queries: QueriesInput) -> Tuple[QueryEntry, ...]:
    if isinstance(queries, Mapping):
        return entries_from_mapping(queries)

    entries = []
    seen = set()
    for entry in queries:
        if entry.key in seen:
            continue
        seen.add(entry.key)
        entries.append(entry)
    return tuple(entries)


__all__ = ["Nri", "PackageNri"]
