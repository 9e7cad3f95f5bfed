"""Filename helpers for /-joined paths.

Every function accepts either a path string or an Nri; for an Nri only its
path (no scheme, no query tail) is inspected. Nothing here touches the
filesystem.
"""

from typing import Optional, Union

from .types import Nri

PathLike = Union[str, Nri, None]


def _path_of(value: PathLike) -> Optional[str]:
    if isinstance(value, Nri):
        return value.path
    return value


def filename(value: PathLike) -> str:
    """Last /-delimited component.

    Examples:
        >>> filename("a/b/c.txt")
        'c.txt'
        >>> filename("")
        ''
    """
    path = _path_of(value)
    if not path:
        return ""
    return path.rsplit("/", 1)[-1]


def filename_without_extension(value: PathLike) -> str:
    """Filename up to its last dot; the whole filename when there is none."""
    name = filename(value)
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def extension(value: PathLike) -> str:
    """Text after the filename's last dot, or empty string."""
    name = filename(value)
    _, dot, ext = name.rpartition(".")
    return ext if dot else ""


__all__ = ["extension", "filename", "filename_without_extension"]
