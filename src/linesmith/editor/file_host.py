"""
FileEditorHost: runs macros against a file on disk.
"""

from pathlib import Path
from typing import List, Optional

from linesmith.exceptions import DocumentError
from linesmith.logging_config import logger
from linesmith.schemas import DocumentSymbol, Selection
from .document import InMemoryDocument
from .host import InMemoryEditorHost
from .writer import DocumentWriter


class FileEditorHost(InMemoryEditorHost):
    """
    Editor host over a single file.

    The file is loaded into an in-memory document; edits stay in memory
    until save() writes them back.
    """

    def __init__(
        self,
        file_path: Path,
        selection: Optional[Selection] = None,
        symbols: Optional[List[DocumentSymbol]] = None,
        config: Optional[dict] = None,
    ):
        self.file_path = Path(file_path)
        self.config = config or {}
        super().__init__(self._load(self.file_path), selection, symbols)

    @staticmethod
    def _load(file_path: Path) -> InMemoryDocument:
        try:
            # newline='' keeps CRLF visible for line ending detection
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(str(file_path), str(e)) from e

        logger.debug(f"Loaded {file_path}")
        return InMemoryDocument(content, uri=str(file_path))

    def save(self) -> Optional[str]:
        """
        Write the document back to its file.

        Returns:
            Path of the backup taken before writing, if backups are enabled.

        Raises:
            DocumentError: If the file could not be written.
        """
        writer = DocumentWriter(self.config)
        success, backup_path = writer.write(str(self.file_path), self.document.text, self.document.line_ending)
        if not success:
            raise DocumentError(str(self.file_path), "write failed")
        return backup_path
