"""
Configuration for the editor host layer.
"""

from linesmith.paths import get_paths
from linesmith.user_config import get_user_config


def get_editor_config():
    """
    Get editor configuration with dynamic paths.

    Paths are resolved at runtime to support the .linesmith/ directory structure.
    """
    paths = get_paths()
    return {
        "backup_enabled": get_user_config().get("editor.backup_enabled", True),
        "backup_dir": str(paths.backups_dir),
    }


SUPPORTED_CURSOR_DIRECTIONS = ("left", "right")
