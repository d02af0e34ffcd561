import sys
import os
from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
LOG_FILE_NAME = "linesmith.log"

_logging_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None, force=False):
    """
    Configures the global logger.

    Console logs go to stderr unless LINESMITH_MACHINE_MODE is set, so
    machine-mode stdout stays pure JSON. The rotating file under
    .linesmith/logs/ only exists when LINESMITH_FILE_LOGGING is set.

    Args:
        level: Console logging level.
        suppress_console: Skip the console sink. None reads LINESMITH_MACHINE_MODE.
        enable_file_logging: Add the file sink. None reads LINESMITH_FILE_LOGGING.
        force: Reconfigure even if logging was already set up.
    """
    global _logging_configured

    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = _env_flag("LINESMITH_MACHINE_MODE")
    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging is None:
        enable_file_logging = _env_flag("LINESMITH_FILE_LOGGING")
    if enable_file_logging:
        from linesmith.paths import get_paths
        paths = get_paths()
        paths.ensure_dirs()
        logger.add(
            paths.logs_dir / LOG_FILE_NAME,
            level="INFO",
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
        )


# Configure the logger on import (will check env var for machine mode)
setup_logging()
