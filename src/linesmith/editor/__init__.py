"""
Editor host layer: documents, hosts and the file writer.
"""

from .document import InMemoryDocument, TextDocument, detect_line_ending
from .host import EditorHost, InMemoryEditorHost
from .file_host import FileEditorHost
from .writer import DocumentWriter

__all__ = [
    "TextDocument",
    "InMemoryDocument",
    "detect_line_ending",
    "EditorHost",
    "InMemoryEditorHost",
    "FileEditorHost",
    "DocumentWriter",
]
