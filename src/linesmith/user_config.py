"""
Linesmith User Configuration

Settings come from three layers, later ones winning key by key:
- Built-in defaults (DEFAULT_CONFIG)
- ~/.linesmith/config.json, shared by every project
- .linesmith/config.json in the project root

Only the "macros" and "editor" sections are read by Linesmith:
{
  "macros": {"indent_size": 4, "log_level_method": "info"},
  "editor": {"backup_enabled": true}
}
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from linesmith.logging_config import logger
from linesmith.paths import get_paths


DEFAULT_CONFIG = {
    "macros": {
        "indent_size": 4,
        "log_level_method": "info",
    },
    "editor": {
        "backup_enabled": True,
    }
}


def _merge(base: Dict, override: Dict) -> Dict:
    """Copy of `base` with `override` laid over it, nested sections merged."""
    merged = {key: _merge(value, {}) if isinstance(value, dict) else value for key, value in base.items()}
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class UserConfig:
    """
    Layered user settings for one project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        paths = get_paths(project_root)
        self.global_config_path = paths.global_config
        self.local_config_path = paths.local_config
        self._config = self._load()

    def _load(self) -> Dict[str, Any]:
        config = _merge(DEFAULT_CONFIG, {})
        for scope, path in (("global", self.global_config_path), ("local", self.local_config_path)):
            if not path.exists():
                continue
            try:
                config = _merge(config, json.loads(path.read_text()))
                logger.debug(f"Loaded {scope} config from {path}")
            except (OSError, json.JSONDecodeError) as e:
                # A broken file falls back to the layers below it
                logger.warning(f"Ignoring unreadable {scope} config {path}: {e}")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dot-separated key such as "macros.indent_size".
        Returns `default` when any part of the key is missing.
        """
        value = self._config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def set_local(self, key: str, value: Any) -> bool:
        """
        Write a dot-separated key into the project's config file and reload.

        Returns:
            False when the file cannot be read or written, True otherwise.
        """
        path = self.local_config_path
        try:
            stored = json.loads(path.read_text()) if path.exists() else {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot update {path}: {e}")
            return False

        *sections, leaf = key.split(".")
        target = stored
        for section in sections:
            target = target.setdefault(section, {})
        target[leaf] = value

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(stored, indent=2))
        except OSError as e:
            logger.error(f"Cannot save {path}: {e}")
            return False

        self._config = self._load()
        logger.info(f"Saved local config: {key}={value}")
        return True


# Global singleton
_config: Optional[UserConfig] = None


def get_user_config(project_root: Optional[Path] = None) -> UserConfig:
    """
    Shared UserConfig for the current directory, or a fresh one for an
    explicit project root.
    """
    global _config
    if project_root is not None:
        return UserConfig(project_root)
    if _config is None:
        _config = UserConfig()
    return _config


def reset_user_config() -> None:
    """Reset the global config singleton (for testing)."""
    global _config
    _config = None
