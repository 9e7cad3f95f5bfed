"""Nri: resource identifiers for app, package, user, network and project files.

Syntax:
    scheme::path[?query]

Examples:
    nars::assets/images/logo.png            # Asset bundled with the app
    npkrs::ui_kit/icons/close.png           # Asset bundled with package ui_kit
    nurs::/home/me/photo.jpg?thumbnail=small  # User file, thumbnail preferred
    uri::https://example.com/banner.png     # Network location
    nprs::images/cover.png?scale=2          # File relative to the open project
"""

from .config import NriSettings, SettingsError, load_settings
from .context import EnvironmentProjectContext, ProjectContext, StaticProjectContext
from .errors import (
    AmbiguousSchemeDelimiterError,
    EmptyInputError,
    EmptyPathError,
    InvalidQueryValueError,
    InvalidSchemeError,
    MissingProjectContextError,
    MissingSchemeDelimiterError,
    NriError,
    NriParseError,
    NriResolutionError,
    PackageResourceMalformedError,
    QueryKeyNotFoundError,
    UnknownSchemeError,
)
from .parser import parse_nri, try_parse
from .paths import extension, filename, filename_without_extension
from .query import QueryEntry, format_query_string, parse_query_string, query_entry
from .resolver import FileSystem, LocalFileSystem, NriResolver, ResolvedResource
from .schemes import SCHEME_TOKENS, Scheme, classify, is_valid_scheme
from .thumbnails import DirectoryThumbnailTransformer, ThumbnailSpec, ThumbnailTransformer
from .types import Nri, PackageNri

__all__ = [
    "__version__",
    "AmbiguousSchemeDelimiterError",
    "DirectoryThumbnailTransformer",
    "EmptyInputError",
    "EmptyPathError",
    "EnvironmentProjectContext",
    "FileSystem",
    "InvalidQueryValueError",
    "InvalidSchemeError",
    "LocalFileSystem",
    "MissingProjectContextError",
    "MissingSchemeDelimiterError",
    "Nri",
    "NriError",
    "NriParseError",
    "NriResolutionError",
    "NriResolver",
    "NriSettings",
    "PackageNri",
    "PackageResourceMalformedError",
    "ProjectContext",
    "QueryEntry",
    "QueryKeyNotFoundError",
    "ResolvedResource",
    "SCHEME_TOKENS",
    "Scheme",
    "SettingsError",
    "StaticProjectContext",
    "ThumbnailSpec",
    "ThumbnailTransformer",
    "UnknownSchemeError",
    "classify",
    "extension",
    "filename",
    "filename_without_extension",
    "format_query_string",
    "is_valid_scheme",
    "load_settings",
    "parse_nri",
    "parse_query_string",
    "query_entry",
    "try_parse",
]

__version__ = "0.0.1"
