"""
Editor macros: line reformatting, JSON printing, quote swapping and log
statement generation.
"""

from .facade import MacroFacade
from .registry import MACROS, MacroDescriptor, get_macro, list_macros, run_macro
from .indent import compute_indent_level
from .reformatter import reformat_region, split_line_to_multiline
from .printer import convert_json_to_literal, print_structured
from .resolver import find_enclosing_class, find_innermost_container
from .logger_context import build_log_prefix, build_log_statement, scan_logger_context
from .quotes import swap_string_quotes
from .destructure import convert_to_destructured_input
from .config import MACRO_CONFIG, get_macro_config

__all__ = [
    # Main facade
    "MacroFacade",

    # Registry
    "MACROS",
    "MacroDescriptor",
    "get_macro",
    "list_macros",
    "run_macro",

    # Scanners and printers
    "compute_indent_level",
    "reformat_region",
    "split_line_to_multiline",
    "convert_json_to_literal",
    "print_structured",
    "find_enclosing_class",
    "find_innermost_container",
    "build_log_prefix",
    "build_log_statement",
    "scan_logger_context",
    "swap_string_quotes",
    "convert_to_destructured_input",

    # Configuration
    "MACRO_CONFIG",
    "get_macro_config",
]
