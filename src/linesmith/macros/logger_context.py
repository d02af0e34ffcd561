"""
Logger-context heuristic.

Infers how a document creates and calls its logger with two independent
first-match passes over its lines. Cheap on purpose: a plausible log
statement is a convenience, not a correctness requirement.
"""

import re
from typing import Iterable, Optional, Sequence

from linesmith.logging_config import logger
from linesmith.schemas import LoggerDetails
from .config import MACRO_CONFIG

LOGGER_USAGE_PATTERN = re.compile(r"(?:this\.)?logger\.(debug|info|warn|error)")


def scan_logger_context(
    lines: Sequence[str],
    init_markers: Iterable[str] = MACRO_CONFIG["logger_init_markers"],
    prefix_marker: str = MACRO_CONFIG["logger_prefix_marker"],
) -> Optional[LoggerDetails]:
    """
    Work out how the document's logger is set up and called.

    Pass 1 finds the first line holding any init marker; whether that line
    also holds the prefix marker decides has_explicit_prefix. Pass 2 scans
    every line again for the first logger call and takes its receiver,
    defaulting to "logger" when the document never calls it.

    Returns:
        LoggerDetails, or None when no line initialises a logger.
    """
    markers = tuple(init_markers)

    init_line = next((line for line in lines if any(marker in line for marker in markers)), None)
    if init_line is None:
        logger.debug("No line initialises a logger")
        return None

    has_explicit_prefix = prefix_marker in init_line
    logger.debug(f"Logger init line: {init_line.strip()!r} (explicit prefix: {has_explicit_prefix})")

    receiver = "logger"
    for line in lines:
        match = LOGGER_USAGE_PATTERN.search(line)
        if match:
            receiver = "this.logger" if match.group(0).startswith("this.") else "logger"
            logger.debug(f"Logger usage example: {match.group(0)!r}")
            break
    else:
        logger.debug("No logger usage example, defaulting to 'logger'")

    return LoggerDetails(usage_receiver=receiver, has_explicit_prefix=has_explicit_prefix)


def build_log_prefix(
    method_name: Optional[str],
    class_name: Optional[str],
    has_explicit_prefix: bool,
) -> str:
    """
    Bracketed context for a log message, e.g. "[Service][handle]".

    The class name is only added when the logger was not created with a
    prefix of its own.
    """
    prefix = f"[{method_name}]" if method_name else ""
    if not has_explicit_prefix and class_name:
        prefix = f"[{class_name}]{prefix}"
    return prefix


def build_log_statement(receiver: str, prefix: str, method: str = "info") -> str:
    """A log call with an open message, e.g. "logger.info('[run] ');"."""
    message = f"{prefix} " if prefix else ""
    return f"{receiver}.{method}('{message}');"
