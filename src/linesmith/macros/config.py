"""
Configuration for the editor macros.

Contains indentation defaults and the markers used to recognise logger
initialisation and usage.
"""

from typing import Any, Dict

from linesmith.exceptions import ConfigError
from linesmith.user_config import get_user_config


MACRO_CONFIG = {
    "indent_size": 4,
    "logger_init_markers": ("LoggerV3.getLambdaLogger()", "LoggerWrapper.getLogger"),
    "logger_prefix_marker": "prefix:",
    "log_level_method": "info",
    "log_cursor_offset": 3,  # Lands the cursor inside the generated quotes
}

LOG_LEVEL_METHODS = ("debug", "info", "warn", "error")

NO_EDITOR_MESSAGE = "Editor is not opening."
NO_LOGGER_MESSAGE = "No logger context found."


def get_macro_config() -> Dict[str, Any]:
    """
    Get macro configuration with user overrides applied.

    Values under the "macros" key of the user config take precedence over
    MACRO_CONFIG.
    """
    overrides = get_user_config().get("macros", {}) or {}
    config = {**MACRO_CONFIG, **overrides}
    validate_macro_config(config)
    return config


def validate_macro_config(config: Dict[str, Any]) -> None:
    """
    Validate macro settings.

    Raises:
        ConfigError: If the indent size or log method is unusable.
    """
    indent_size = config.get("indent_size")
    if not isinstance(indent_size, int) or isinstance(indent_size, bool) or indent_size <= 0:
        raise ConfigError(f"indent_size must be a positive integer, got {indent_size!r}")

    method = config.get("log_level_method")
    if method not in LOG_LEVEL_METHODS:
        supported = ", ".join(LOG_LEVEL_METHODS)
        raise ConfigError(f"log_level_method '{method}' is not supported. Supported methods: {supported}")
