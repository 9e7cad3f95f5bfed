"""Thumbnail variants.

A thumbnail is a smaller precomputed copy of a file resource. Callers ask
for one with a ThumbnailSpec, or the identifier asks for one itself:

    nurs::/photos/cat.jpg?thumbnail=small

The transformer only computes where the variant would live; whether the
file exists is left to the resolver's filesystem collaborator.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from .types import Nri


@dataclass(frozen=True)
class ThumbnailSpec:
    """Named thumbnail variant (e.g. "small", "256")."""

    name: str

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["ThumbnailSpec"]:
        if value is None or not value.strip():
            return None
        return cls(value.strip())


class ThumbnailTransformer(Protocol):
    """Computes thumbnail paths for identifiers and absolute files."""

    query_key: str

    def thumbnail_path_for_nri(self, nri: Nri, spec: ThumbnailSpec) -> str: ...

    def thumbnail_path_for_file(self, path: str, spec: ThumbnailSpec) -> str: ...


class DirectoryThumbnailTransformer:
    """Place thumbnails in a hidden directory beside the original.

    Examples:
        "/photos/cat.jpg" + ThumbnailSpec("small") → "/photos/.thumbnails/small/cat.jpg"
        "cat.jpg" + ThumbnailSpec("small")         → ".thumbnails/small/cat.jpg"
    """

    def __init__(self, directory: str = ".thumbnails", query_key: str = "thumbnail"):
        self.directory = directory
        self.query_key = query_key

    def thumbnail_path_for_nri(self, nri: Nri, spec: ThumbnailSpec) -> str:
        return self.thumbnail_path_for_file(nri.path, spec)

    def thumbnail_path_for_file(self, path: str, spec: ThumbnailSpec) -> str:
        parent, slash, name = path.rpartition("/")
        prefix = f"{parent}/" if slash else ""
        return f"{prefix}{self.directory}/{spec.name}/{name}"


__all__ = ["DirectoryThumbnailTransformer", "ThumbnailSpec", "ThumbnailTransformer"]
