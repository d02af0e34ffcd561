"""
Linesmith Path Configuration

Where Linesmith keeps its files. Project paths hang off the working
directory unless a root is given; the global config lives under HOME.

.linesmith/
├── config.json          # Project config overrides
├── backups/             # Copies taken before --write rewrites a file
└── logs/                # linesmith.log when file logging is on
"""

from pathlib import Path
from typing import Optional


class LinesmithPaths:
    """
    Lazily resolved paths for one project root (CWD by default).
    """

    LINESMITH_DIR = ".linesmith"
    CONFIG_NAME = "config.json"
    BACKUPS_DIR = "backups"
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None):
        self._project_root = project_root

    @property
    def project_root(self) -> Path:
        return self._project_root if self._project_root is not None else Path.cwd()

    @property
    def linesmith_dir(self) -> Path:
        return self.project_root / self.LINESMITH_DIR

    @property
    def local_config(self) -> Path:
        return self.linesmith_dir / self.CONFIG_NAME

    @property
    def global_config(self) -> Path:
        """Per-user config, resolved against the current HOME."""
        return Path.home() / self.LINESMITH_DIR / self.CONFIG_NAME

    @property
    def backups_dir(self) -> Path:
        return self.linesmith_dir / self.BACKUPS_DIR

    @property
    def logs_dir(self) -> Path:
        return self.linesmith_dir / self.LOGS_DIR

    def ensure_dirs(self) -> None:
        """Create .linesmith/ with its backups/ and logs/ subdirectories."""
        self.backups_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(exist_ok=True)


_default_paths: Optional[LinesmithPaths] = None


def get_paths(project_root: Optional[Path] = None) -> LinesmithPaths:
    """
    Shared paths for the working directory, or fresh paths for an explicit
    project root.
    """
    global _default_paths
    if project_root is not None:
        return LinesmithPaths(project_root)
    if _default_paths is None:
        _default_paths = LinesmithPaths()
    return _default_paths


def reset_paths() -> None:
    """Reset the global paths instance (useful for testing)."""
    global _default_paths
    _default_paths = None
