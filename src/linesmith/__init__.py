"""
Linesmith - Editor Text-Transformation Macros

Line-level reformatting, JSON-to-literal printing and logging-statement
generation for JavaScript/TypeScript sources.
"""

__version__ = "0.3.0"

from linesmith.schemas import DocumentSymbol, LoggerDetails, MacroResult, Selection, SymbolKind
from linesmith.macros import (
    MacroFacade,
    compute_indent_level,
    find_innermost_container,
    list_macros,
    print_structured,
    run_macro,
    scan_logger_context,
    split_line_to_multiline,
)

__all__ = [
    "__version__",
    "DocumentSymbol",
    "LoggerDetails",
    "MacroResult",
    "Selection",
    "SymbolKind",
    "MacroFacade",
    "compute_indent_level",
    "find_innermost_container",
    "list_macros",
    "print_structured",
    "run_macro",
    "scan_logger_context",
    "split_line_to_multiline",
]
