from enum import IntEnum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class SymbolKind(IntEnum):
    """
    Symbol kinds, numbered the way editor symbol providers report them.
    """
    File = 0
    Module = 1
    Namespace = 2
    Package = 3
    Class = 4
    Method = 5
    Property = 6
    Field = 7
    Constructor = 8
    Enum = 9
    Interface = 10
    Function = 11
    Variable = 12
    Constant = 13


class DocumentSymbol(BaseModel):
    """
    A named symbol in a document. Lines are 0-based and inclusive.
    Top-level symbols and their children form a forest.
    """
    name: str
    kind: SymbolKind
    start_line: int
    end_line: int
    children: List["DocumentSymbol"] = Field(default_factory=list)

    def contains_line(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line


DocumentSymbol.model_rebuild()


class Selection(BaseModel):
    """
    A range in a document. Lines and characters are 0-based; the end
    position is exclusive.
    """
    start_line: int
    start_char: int
    end_line: int
    end_char: int

    @classmethod
    def cursor(cls, line: int, char: int = 0) -> "Selection":
        """An empty selection at a single position."""
        return cls(start_line=line, start_char=char, end_line=line, end_char=char)

    @classmethod
    def whole_line(cls, line: int, length: int) -> "Selection":
        """A selection covering the text of one line, without its line break."""
        return cls(start_line=line, start_char=0, end_line=line, end_char=length)


class LoggerDetails(BaseModel):
    """
    How the document creates and calls its logger.
    Derived per invocation, never persisted.
    """
    usage_receiver: Literal["logger", "this.logger"] = "logger"
    has_explicit_prefix: bool = False


class MacroResult(BaseModel):
    """
    Result of running one macro against an editor host.
    A failed result with a message is an informational stop, not an error.
    """
    macro: str
    success: bool
    replacement: Optional[str] = None  # Text written into the document
    selection: Optional[Selection] = None  # Range that was replaced
    message: Optional[str] = None  # User-facing informational string
    cursor_offset: int = 0  # Characters the cursor moved left after the edit
