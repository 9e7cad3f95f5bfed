"""Query tail encoding and decoding.

The query tail is everything after the first ``?`` of an Nri:

    key=value&flag&other=1

Entries keep their input order. A token without ``=`` is a flag and carries
no value. When a key repeats, the first entry wins.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class QueryEntry:
    """Single query parameter. ``value is None`` marks a flag-only entry."""

    key: str
    value: Optional[str] = None

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def as_query_string(self) -> str:
        return f"{self.key}={self.value}" if self.has_value else self.key


def parse_query_string(query_string: str) -> Tuple[QueryEntry, ...]:
    """Decode a query tail (without the leading ``?``) into entries.

    Examples:
        >>> parse_query_string("scale=2.0&flag")
        (QueryEntry(key='scale', value='2.0'), QueryEntry(key='flag', value=None))

        >>> parse_query_string("a=1&a=2")
        (QueryEntry(key='a', value='1'),)
    """
    entries: List[QueryEntry] = []
    seen = set()

    for token in query_string.split("&"):
        if "=" in token:
            key, _, value = token.partition("=")
            entry = QueryEntry(key, value)
        else:
            entry = QueryEntry(token)

        if entry.key in seen:
            continue
        seen.add(entry.key)
        entries.append(entry)

    return tuple(entries)


def format_query_string(entries: Iterable[QueryEntry]) -> str:
    """Render entries as a query tail, including the leading ``?``.

    Returns an empty string when there are no entries.
    """
    parts = [entry.as_query_string() for entry in entries]
    if not parts:
        return ""
    return "?" + "&".join(parts)


def query_entry(key: str, value: Optional[str] = None) -> QueryEntry:
    """Build an entry; omit ``value`` for a flag."""
    return QueryEntry(key, value)


def entries_from_mapping(mapping: Dict[str, Optional[str]]) -> Tuple[QueryEntry, ...]:
    """Build entries from an ordered mapping of key to optional value."""
    return tuple(QueryEntry(key, value) for key, value in mapping.items())


__all__ = [
    "QueryEntry",
    "entries_from_mapping",
    "format_query_string",
    "parse_query_string",
    "query_entry",
]
