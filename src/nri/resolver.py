"""Nri resolution - map identifiers to resource references.

The resolver decides which namespace an identifier belongs to and produces a
ResolvedResource that an external loader (asset bundle, file reader, HTTP
client) can fetch. It does not read any bytes itself.
"""

import logging
from pathlib import Path
from typing import Literal, Optional, Protocol

from pydantic import BaseModel, ConfigDict

from .config import NriSettings, load_settings
from .context import ProjectContext
from .errors import (
    InvalidQueryValueError,
    MissingProjectContextError,
    PackageResourceMalformedError,
)
from .parser import parse_nri
from .thumbnails import DirectoryThumbnailTransformer, ThumbnailSpec, ThumbnailTransformer
from .types import Nri, PackageNri

logger = logging.getLogger(__name__)

ResourceKind = Literal["asset", "file", "network"]


class FileSystem(Protocol):
    def exists(self, path: str) -> bool: ...


class LocalFileSystem:
    """Existence checks against the local filesystem."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()


class ResolvedResource(BaseModel):
    """Identifier resolved to a namespace-specific location.

    Examples:
        nars::assets/logo.png         → kind="asset", location="assets/logo.png"
        npkrs::ui_kit/icons/x.png     → kind="asset", location="icons/x.png", package="ui_kit"
        nurs::/photos/cat.jpg         → kind="file", location="/photos/cat.jpg", scale=1.0
        uri::https://example.com/a    → kind="network", location="https://example.com/a"
        nprs::img.png (root /proj)    → kind="file", location="/proj/img.png"
    """

    model_config = ConfigDict(frozen=True)

    source: str
    """Canonical string of the identifier that was resolved."""

    kind: ResourceKind
    """Which loader should fetch the resource."""

    location: str
    """Asset key, file path, or URL."""

    scale: Optional[float] = None
    """Pixel density. None for assets means a scale-free lookup."""

    package: Optional[str] = None
    """Owning package for package assets."""

    thumbnail: Optional[str] = None
    """Thumbnail variant name when a thumbnail file was selected."""


class NriResolver:
    """Resolve identifiers to ResolvedResource references.

    Hints passed to ``resolve`` are fallbacks: an identifier's own ``scale``
    query and thumbnail query take precedence over them.

    Example usage:
        resolver = NriResolver(project_context=EnvironmentProjectContext())
        resolved = resolver.resolve(parse_nri("nprs::images/cover.png?scale=2"))
        load_file(resolved.location, scale=resolved.scale)
    """

    def __init__(
        self,
        project_context: Optional[ProjectContext] = None,
        thumbnails: Optional[ThumbnailTransformer] = None,
        filesystem: Optional[FileSystem] = None,
        settings: Optional[NriSettings] = None,
    ):
        """Initialize resolver with its collaborators.

        Args:
            project_context: Source of the current project root for nprs::
            thumbnails: Thumbnail path transformer (default: hidden directory)
            filesystem: Existence checks for thumbnails (default: local disk)
            settings: Resolver settings (default: loaded from environment)
        """
        self.settings = settings or load_settings()
        self.project_context = project_context
        self.thumbnails = thumbnails or DirectoryThumbnailTransformer(
            query_key=self.settings.thumbnail_query_key
        )
        self.filesystem = filesystem or LocalFileSystem()

    def resolve_string(
        self,
        raw: str,
        scale: Optional[float] = None,
        project_path: Optional[str] = None,
        thumbnail: Optional[ThumbnailSpec] = None,
    ) -> ResolvedResource:
        """Parse ``raw`` and resolve it. Parse errors propagate."""
        return self.resolve(
            parse_nri(raw), scale=scale, project_path=project_path, thumbnail=thumbnail
        )

    def resolve(
        self,
        nri: Nri,
        scale: Optional[float] = None,
        project_path: Optional[str] = None,
        thumbnail: Optional[ThumbnailSpec] = None,
    ) -> ResolvedResource:
        """Resolve an identifier to a resource reference.

        Args:
            nri: Identifier to resolve
            scale: Fallback scale when the identifier has no scale query
            project_path: Project root for nprs:: (overrides project context)
            thumbnail: Fallback thumbnail when the identifier requests none

        Returns:
            ResolvedResource for the identifier's namespace

        Raises:
            InvalidQueryValueError: If the scale query is not a number
            PackageResourceMalformedError: If a npkrs:: identifier has no
                package segment
            MissingProjectContextError: If a nprs:: identifier has no
                project root from either project_path or the context
        """
        scale = self._resolve_scale(nri, scale)
        thumbnail = self._resolve_thumbnail(nri, thumbnail)

        if nri.is_app_resource:
            logger.debug("Resolving %s as app asset", nri)
            return ResolvedResource(
                source=nri.nri_string, kind="asset", location=nri.path, scale=scale
            )

        elif nri.is_package_resource:
            package_nri = PackageNri(nri)
            if package_nri.package is None:
                raise PackageResourceMalformedError(
                    f"Package resource has no package segment: {nri}",
                    nri.nri_string,
                )
            logger.debug("Resolving %s as asset in package %s", nri, package_nri.package)
            return ResolvedResource(
                source=nri.nri_string,
                kind="asset",
                location=package_nri.path,
                scale=scale,
                package=package_nri.package,
            )

        elif nri.is_user_resource:
            if thumbnail is not None:
                thumbnail_path = self.thumbnails.thumbnail_path_for_nri(nri, thumbnail)
                resolved = self._existing_thumbnail(nri, thumbnail_path, thumbnail, scale)
                if resolved is not None:
                    return resolved
            logger.debug("Resolving %s as user file", nri)
            return self._file(nri, nri.path, scale)

        elif nri.is_network_resource:
            logger.debug("Resolving %s as network resource", nri)
            return ResolvedResource(
                source=nri.nri_string,
                kind="network",
                location=nri.nri_string_without_scheme,
                scale=self._scale_or_default(scale),
            )

        elif nri.is_project_resource:
            root = self._project_root(project_path)
            if root is None:
                raise MissingProjectContextError(
                    f"No project path available to resolve {nri}", nri.nri_string
                )
            full_path = root + "/" + nri.path
            if thumbnail is not None:
                thumbnail_path = self.thumbnails.thumbnail_path_for_file(full_path, thumbnail)
                resolved = self._existing_thumbnail(nri, thumbnail_path, thumbnail, scale)
                if resolved is not None:
                    return resolved
            logger.debug("Resolving %s as project file under %s", nri, root)
            return self._file(nri, full_path, scale)

        raise AssertionError(f"Unhandled scheme: {nri.scheme!r}")

    def _resolve_scale(self, nri: Nri, scale: Optional[float]) -> Optional[float]:
        key = self.settings.scale_query_key
        if not nri.has_query(key):
            return scale
        try:
            return nri.get_query_value(key, float)
        except (TypeError, ValueError) as e:
            raise InvalidQueryValueError(
                f"Query {key!r} must be a number in {nri}: {nri.query_value(key)!r}",
                nri.nri_string,
            ) from e

    def _resolve_thumbnail(
        self, nri: Nri, thumbnail: Optional[ThumbnailSpec]
    ) -> Optional[ThumbnailSpec]:
        key = self.thumbnails.query_key
        if nri.has_query(key):
            requested = nri.get_query_value(key, ThumbnailSpec.try_parse)
            if requested is not None:
                return requested
        return thumbnail

    def _project_root(self, project_path: Optional[str]) -> Optional[str]:
        if project_path is not None:
            return project_path
        if self.project_context is not None:
            return self.project_context.current_project_root()
        return None

    def _scale_or_default(self, scale: Optional[float]) -> float:
        return scale if scale is not None else self.settings.default_scale

    def _existing_thumbnail(
        self,
        nri: Nri,
        path: str,
        thumbnail: ThumbnailSpec,
        scale: Optional[float],
    ) -> Optional[ResolvedResource]:
        if not self.filesystem.exists(path):
            logger.debug("Thumbnail %s for %s not found, using original", path, nri)
            return None
        logger.debug("Resolving %s to thumbnail %s", nri, path)
        return ResolvedResource(
            source=nri.nri_string,
            kind="file",
            location=path,
            scale=self._scale_or_default(scale),
            thumbnail=thumbnail.name,
        )

    def _file(self, nri: Nri, path: str, scale: Optional[float]) -> ResolvedResource:
        return ResolvedResource(
            source=nri.nri_string,
            kind="file",
            location=path,
            scale=self._scale_or_default(scale),
        )


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "NriResolver",
    "ResolvedResource",
    "ResourceKind",
]
