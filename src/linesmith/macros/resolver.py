"""
Symbol-container resolution over a document's symbol forest.
"""

from typing import List, Optional

from linesmith.logging_config import logger
from linesmith.schemas import DocumentSymbol, SymbolKind


def _first_containing(symbols: List[DocumentSymbol], target_line: int) -> Optional[DocumentSymbol]:
    return next((s for s in symbols if s.contains_line(target_line)), None)


def find_innermost_container(
    symbols: List[DocumentSymbol],
    target_line: int,
) -> Optional[DocumentSymbol]:
    """
    Find the innermost named container of a line.

    Takes the first sibling whose range holds the line. Classes are
    descended into; the deepest match wins and the class itself is
    returned when none of its children hold the line. Any other kind is
    returned without looking at its children, so a line inside a closure
    resolves to the enclosing method.

    Args:
        symbols: Top-level symbols of the document
        target_line: 0-based line number

    Returns:
        The container, or None if no top-level symbol holds the line.
    """
    container = _first_containing(symbols, target_line)

    while container is not None and container.kind == SymbolKind.Class:
        logger.debug(f"Line {target_line} is inside class '{container.name}', checking its members")
        member = _first_containing(container.children, target_line)
        if member is None:
            break
        container = member

    if container is None:
        logger.debug(f"No symbol contains line {target_line}")
    return container


def find_enclosing_class(
    symbols: List[DocumentSymbol],
    target_line: int,
) -> Optional[DocumentSymbol]:
    """First top-level class whose range holds the line. Nested classes are not considered."""
    return next(
        (s for s in symbols if s.kind == SymbolKind.Class and s.contains_line(target_line)),
        None,
    )
