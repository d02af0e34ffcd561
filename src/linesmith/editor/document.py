"""
Text documents as seen by the macros: read-only line access plus the
replace operation an editor host needs to apply edits.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from linesmith.schemas import Selection


def detect_line_ending(content: str) -> str:
    """'\\r\\n' if the content uses CRLF anywhere, otherwise '\\n'."""
    if '\r\n' in content:
        return '\r\n'
    return '\n'


class TextDocument(ABC):
    """Read-only view of a text buffer."""

    @property
    @abstractmethod
    def uri(self) -> str:
        """Identity of the document, used to request its symbols."""

    @property
    @abstractmethod
    def line_count(self) -> int:
        ...

    @abstractmethod
    def line_at(self, index: int) -> str:
        """Text of a 0-based line, without its line break."""

    @abstractmethod
    def get_text(self, selection: Selection) -> str:
        ...

    def lines(self) -> List[str]:
        return [self.line_at(i) for i in range(self.line_count)]


class InMemoryDocument(TextDocument):
    """
    A document held as a list of lines.

    Line breaks are normalised to LF internally; the original style is
    kept in `line_ending` so it can be restored on save.
    """

    def __init__(self, text: str, uri: str = "untitled:document"):
        self._uri = uri
        self.line_ending = detect_line_ending(text)
        self._lines = text.replace('\r\n', '\n').split('\n')

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return '\n'.join(self._lines)

    def line_at(self, index: int) -> str:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"Line {index} is out of range (document has {len(self._lines)} lines)")
        return self._lines[index]

    def offset_at(self, line: int, char: int) -> int:
        """Character offset of a position, clamping char to the line length."""
        line_text = self.line_at(line)
        return sum(len(l) + 1 for l in self._lines[:line]) + min(max(char, 0), len(line_text))

    def position_at(self, offset: int) -> Tuple[int, int]:
        before = self.text[:offset].split('\n')
        return len(before) - 1, len(before[-1])

    def get_text(self, selection: Selection) -> str:
        start = self.offset_at(selection.start_line, selection.start_char)
        end = self.offset_at(selection.end_line, selection.end_char)
        return self.text[start:end]

    def replace(self, selection: Selection, new_text: str) -> Tuple[int, int]:
        """
        Replace a range with new text.

        Returns:
            (line, char) position just after the inserted text.
        """
        start = self.offset_at(selection.start_line, selection.start_char)
        end = self.offset_at(selection.end_line, selection.end_char)
        inserted = new_text.replace('\r\n', '\n')

        content = self.text
        self._lines = (content[:start] + inserted + content[end:]).split('\n')
        return self.position_at(start + len(inserted))
