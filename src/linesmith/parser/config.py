import re

from linesmith.schemas import SymbolKind

# Mapping of file extensions to language names used in this module
SUPPORTED_LANGUAGES = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
}

# Names that the method pattern picks up from control-flow statements
NON_SYMBOL_NAMES = frozenset({"if", "for", "while", "switch", "catch", "with", "function", "return"})

_EXPORT = r"(?:export\s+(?:default\s+)?)?"
_MEMBER_MODIFIERS = r"(?:(?:public|private|protected|static|readonly|async|get|set|override)\s+)*"

# Class fields holding arrow functions: `handle = async (evt) => {`
_ARROW_MEMBER = (
    rf"^\s*{_MEMBER_MODIFIERS}([A-Za-z_$][\w$]*)\s*(?::[^=\n]+)?=\s*(?:async\s+)?"
    r"(?:\([^)]*\)|[A-Za-z_$][\w$]*)\s*(?::\s*[^=\n]+)?=>"
)

# Kinds a class body may hold directly; other matches there are locals of a
# member the patterns did not recognise.
CLASS_MEMBER_KINDS = frozenset({SymbolKind.Method, SymbolKind.Constructor})

# Regex patterns for finding symbols, as (kind, pattern) pairs in priority
# order for symbols that share a line. re.MULTILINE lets ^ match the start
# of each line.
LANGUAGE_QUERIES = {
    "javascript": (
        (SymbolKind.Class, re.compile(rf"^\s*{_EXPORT}class\s+([A-Za-z_$][\w$]*)", re.MULTILINE)),
        (SymbolKind.Function, re.compile(rf"^\s*{_EXPORT}(?:async\s+)?function\s*\*?\s*([A-Za-z_$][\w$]*)", re.MULTILINE)),
        (SymbolKind.Variable, re.compile(rf"^\s*{_EXPORT}(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*=", re.MULTILINE)),
        (SymbolKind.Method, re.compile(rf"^\s*{_MEMBER_MODIFIERS}\*?([A-Za-z_$][\w$]*)\s*\([^)]*\)\s*\{{", re.MULTILINE)),
        (SymbolKind.Method, re.compile(_ARROW_MEMBER, re.MULTILINE)),
    ),
    "typescript": (
        (SymbolKind.Class, re.compile(rf"^\s*{_EXPORT}(?:abstract\s+)?class\s+([A-Za-z_$][\w$]*)", re.MULTILINE)),
        (SymbolKind.Interface, re.compile(rf"^\s*{_EXPORT}interface\s+([A-Za-z_$][\w$]*)", re.MULTILINE)),
        (SymbolKind.Enum, re.compile(rf"^\s*{_EXPORT}(?:const\s+)?enum\s+([A-Za-z_$][\w$]*)", re.MULTILINE)),
        (SymbolKind.Function, re.compile(rf"^\s*{_EXPORT}(?:async\s+)?function\s*\*?\s*([A-Za-z_$][\w$]*)", re.MULTILINE)),
        (SymbolKind.Variable, re.compile(rf"^\s*{_EXPORT}(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*(?::[^=]+)?=", re.MULTILINE)),
        (SymbolKind.Method, re.compile(
            rf"^\s*{_MEMBER_MODIFIERS}([A-Za-z_$][\w$]*)\s*(?:<[^>]*>)?\([^)]*\)\s*(?::\s*[^{{;=]+)?\{{",
            re.MULTILINE,
        )),
        (SymbolKind.Method, re.compile(_ARROW_MEMBER, re.MULTILINE)),
    ),
}
