"""
Editor host interface and an in-memory implementation.

The macros only talk to the editor through EditorHost: the active
document, the current selection, the symbol provider and edit
application. Hosts that wrap a real editor suspend on the last three.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from linesmith.logging_config import logger
from linesmith.schemas import DocumentSymbol, Selection
from linesmith.parser import parse_symbols
from .config import SUPPORTED_CURSOR_DIRECTIONS
from .document import InMemoryDocument, TextDocument


class EditorHost(ABC):
    """What a macro needs from the editor it runs in."""

    @abstractmethod
    def active_document(self) -> Optional[TextDocument]:
        """The document being edited, or None when no editor is open."""

    @abstractmethod
    def selection(self) -> Selection:
        ...

    @abstractmethod
    async def document_symbols(self, document: TextDocument) -> List[DocumentSymbol]:
        """Symbol forest of the document."""

    @abstractmethod
    async def apply_edit(self, selection: Selection, text: str) -> bool:
        """Replace the selection with text. Returns True if the edit was applied."""

    @abstractmethod
    async def move_cursor(self, direction: str, amount: int) -> None:
        ...


class InMemoryEditorHost(EditorHost):
    """
    Host backed by an InMemoryDocument.

    Symbols come from `symbols` when given, otherwise from the symbol
    provider for the document's uri. After an edit the cursor sits at the
    end of the inserted text, as in a GUI editor.
    """

    def __init__(
        self,
        document: Optional[InMemoryDocument],
        selection: Optional[Selection] = None,
        symbols: Optional[List[DocumentSymbol]] = None,
    ):
        self.document = document
        self._selection = selection or Selection.cursor(0)
        self._symbols = symbols
        self.edits: List[Tuple[Selection, str]] = []
        self.symbol_requests = 0

    def active_document(self) -> Optional[TextDocument]:
        return self.document

    def selection(self) -> Selection:
        return self._selection

    def select(self, selection: Selection) -> None:
        self._selection = selection

    @property
    def cursor(self) -> Tuple[int, int]:
        return self._selection.end_line, self._selection.end_char

    async def document_symbols(self, document: TextDocument) -> List[DocumentSymbol]:
        self.symbol_requests += 1
        if self._symbols is not None:
            return list(self._symbols)
        return parse_symbols(document.uri, "\n".join(document.lines()))

    async def apply_edit(self, selection: Selection, text: str) -> bool:
        if self.document is None:
            return False
        line, char = self.document.replace(selection, text)
        self.edits.append((selection, text))
        self._selection = Selection.cursor(line, char)
        logger.debug(f"Applied edit at {selection.start_line}:{selection.start_char}, cursor now {line}:{char}")
        return True

    async def move_cursor(self, direction: str, amount: int) -> None:
        if direction not in SUPPORTED_CURSOR_DIRECTIONS:
            raise ValueError(f"Unsupported cursor direction '{direction}'")

        line, char = self.cursor
        step = -amount if direction == "left" else amount
        line_length = len(self.document.line_at(line)) if self.document else 0
        char = min(max(char + step, 0), line_length)
        self._selection = Selection.cursor(line, char)
