from typing import Dict, List, Optional, Tuple

from linesmith.logging_config import logger
from linesmith.parser.config import CLASS_MEMBER_KINDS, LANGUAGE_QUERIES, NON_SYMBOL_NAMES
from linesmith.schemas import DocumentSymbol, SymbolKind


def _find_block_end(content: str, start: int) -> int:
    """
    Offset where the declaration starting at `start` ends.

    That is the brace closing its first block, or a `;` reached before any
    block opens. Falls back to the end of the content.
    """
    depth = 0
    for index in range(start, len(content)):
        char = content[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
        elif char == ";" and depth == 0:
            return index
    return len(content)


def _nest_symbols(symbols: List[DocumentSymbol]) -> List[DocumentSymbol]:
    """
    Arrange flat symbols into a forest by line containment.

    Methods are only kept directly inside a class; elsewhere the method
    patterns match object-literal members, call sites and plain
    assignments. A class body only keeps members, so a local whose method
    went unrecognised is dropped rather than mistaken for one.
    """
    roots: List[DocumentSymbol] = []
    stack: List[DocumentSymbol] = []

    for symbol in sorted(symbols, key=lambda s: (s.start_line, -s.end_line)):
        while stack and stack[-1].end_line < symbol.start_line:
            stack.pop()
        parent: Optional[DocumentSymbol] = stack[-1] if stack else None

        parent_is_class = parent is not None and parent.kind == SymbolKind.Class
        if (symbol.kind in CLASS_MEMBER_KINDS) != parent_is_class:
            continue

        (parent.children if parent else roots).append(symbol)
        stack.append(symbol)

    return roots


def parse_javascript_symbols(content: str, language: str = "javascript") -> List[DocumentSymbol]:
    """
    Scans JavaScript or TypeScript source with regex and brace depth to
    build the document's symbol forest. Lines are 0-based.
    """
    queries = LANGUAGE_QUERIES.get(language, LANGUAGE_QUERIES["javascript"])
    found: Dict[Tuple[int, str], DocumentSymbol] = {}

    for kind, regex_pattern in queries:
        for match in regex_pattern.finditer(content):
            name = match.group(1)
            if name in NON_SYMBOL_NAMES:
                continue

            start_line = content.count("\n", 0, match.start(1))
            if (start_line, name) in found:
                continue

            end_line = content.count("\n", 0, _find_block_end(content, match.start(1)))
            if kind == SymbolKind.Method and name == "constructor":
                kind_found = SymbolKind.Constructor
            else:
                kind_found = kind

            found[(start_line, name)] = DocumentSymbol(
                name=name,
                kind=kind_found,
                start_line=start_line,
                end_line=end_line,
            )
            logger.debug(f"Found {language} symbol: {name} ({kind_found.name}) on lines {start_line}-{end_line}")

    return _nest_symbols(list(found.values()))
