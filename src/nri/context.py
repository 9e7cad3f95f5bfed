"""Project context - where nprs:: identifiers are rooted."""

from pathlib import Path
from typing import Optional, Protocol

from .config import NriSettings, load_settings


class ProjectContext(Protocol):
    def current_project_root(self) -> Optional[str]: ...


class StaticProjectContext:
    """Context with a fixed project root (or none)."""

    def __init__(self, root: Optional[str]):
        self.root = root

    def current_project_root(self) -> Optional[str]:
        return self.root


def find_project_root(marker: str, start_dir: Optional[Path] = None) -> Optional[Path]:
    """Walk up from start_dir looking for a directory containing ``marker``.

    Args:
        marker: File or directory name identifying a project root
        start_dir: Directory to start searching from (default: CWD)

    Returns:
        The first directory containing ``marker``, or None if the
        filesystem root is reached first.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        if (current / marker).exists():
            return current

        # Stop at root directory
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


class EnvironmentProjectContext:
    """Resolve the project root from the environment.

    Resolution order:
    1. $NRI_PROJECT_ROOT (or ``settings.project_root``)
    2. Walk up from start_dir looking for the project marker (.nproj)
    3. None

    Settings are read fresh on each lookup unless passed explicitly.
    """

    def __init__(
        self,
        settings: Optional[NriSettings] = None,
        start_dir: Optional[Path] = None,
    ):
        self.settings = settings
        self.start_dir = start_dir

    def current_project_root(self) -> Optional[str]:
        settings = self.settings or load_settings()

        if settings.project_root:
            return settings.project_root

        found = find_project_root(settings.project_marker, self.start_dir)
        return str(found) if found else None


__all__ = [
    "EnvironmentProjectContext",
    "ProjectContext",
    "StaticProjectContext",
    "find_project_root",
]
