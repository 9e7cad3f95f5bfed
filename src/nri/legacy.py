"""Deprecated project/user rewrite helpers.

These predate NriResolver's project_path handling and are kept so older
callers keep working. New code should resolve nprs:: identifiers through
NriResolver instead of rewriting them.
"""

import warnings

from .parser import parse_nri
from .schemes import Scheme
from .types import Nri


def _deprecated(name: str) -> None:
    warnings.warn(
        f"nri.legacy.{name} is deprecated; resolve identifiers with NriResolver",
        DeprecationWarning,
        stacklevel=3,
    )


def to_absolute(nri: Nri, project_path: str) -> Nri:
    """Rewrite nprs::rel/path as nurs::{project_path}/rel/path.

    Identifiers with any other scheme are returned unchanged.
    """
    _deprecated("to_absolute")
    if nri.is_project_resource:
        return parse_nri(
            f"{Scheme.USER.value}::{project_path}/{nri.nri_string_without_scheme}"
        )
    return nri


def to_project_relative(nri: Nri, project_path: str) -> Nri:
    """Rewrite nurs::{project_path}/rel/path as nprs::rel/path.

    Only the first occurrence of ``{project_path}/`` is removed. Identifiers
    that are not user resources, or that do not contain the project path,
    are returned unchanged.
    """
    _deprecated("to_project_relative")
    prefix = f"{project_path}/"
    if nri.is_user_resource and prefix in nri.path:
        relative = nri.nri_string_without_scheme.replace(prefix, "", 1)
        return parse_nri(f"{Scheme.PROJECT.value}::{relative}")
    return nri


def build_user_resource(project_path: str, relative_path: str) -> Nri:
    """Build nurs::{project_path}/{relative_path}."""
    _deprecated("build_user_resource")
    return parse_nri(f"{Scheme.USER.value}::{project_path}/{relative_path}")


__all__ = ["build_user_resource", "to_absolute", "to_project_relative"]
