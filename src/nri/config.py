"""Resolver settings loaded from the environment.

Environment variables:
    NRI_PROJECT_ROOT    Project root used for nprs:: identifiers
    NRI_PROJECT_MARKER  Directory/file name marking a project root (.nproj)
    NRI_DEFAULT_SCALE   Scale applied to file and network resources (1.0)
    NRI_THUMBNAIL_KEY   Query key requesting a thumbnail variant (thumbnail)
    NRI_SCALE_KEY       Query key carrying a scale (scale)

Settings are read fresh on every call; nothing is cached.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

ENV_PREFIX = "NRI_"

_ENV_FIELDS = {
    "NRI_PROJECT_ROOT": "project_root",
    "NRI_PROJECT_MARKER": "project_marker",
    "NRI_DEFAULT_SCALE": "default_scale",
    "NRI_THUMBNAIL_KEY": "thumbnail_query_key",
    "NRI_SCALE_KEY": "scale_query_key",
}


class SettingsError(ValueError):
    """Environment holds an invalid setting."""

    pass


class NriSettings(BaseModel):
    """Settings consumed by the resolver and project context."""

    model_config = ConfigDict(frozen=True)

    project_root: Optional[str] = None
    project_marker: str = Field(default=".nproj", min_length=1)
    default_scale: float = Field(default=1.0, gt=0)
    thumbnail_query_key: str = Field(default="thumbnail", min_length=1)
    scale_query_key: str = Field(default="scale", min_length=1)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> NriSettings:
    """Build settings from ``environ`` (default: ``os.environ``).

    Empty variables are treated as unset.

    Raises:
        SettingsError: If a variable fails validation
    """
    env = os.environ if environ is None else environ
    data = {
        field: env[name] for name, field in _ENV_FIELDS.items() if env.get(name)
    }
    try:
        return NriSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid {ENV_PREFIX}* setting: {e}") from e


__all__ = ["NriSettings", "SettingsError", "load_settings"]
