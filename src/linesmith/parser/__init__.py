"""
Regex symbol provider for JavaScript and TypeScript documents.
"""

from .facade import parse_symbols
from .javascript_parser import parse_javascript_symbols
from .config import SUPPORTED_LANGUAGES, LANGUAGE_QUERIES

__all__ = [
    "parse_symbols",
    "parse_javascript_symbols",
    "SUPPORTED_LANGUAGES",
    "LANGUAGE_QUERIES",
]
