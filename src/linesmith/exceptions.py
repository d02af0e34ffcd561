# Custom exceptions for Linesmith

class LinesmithError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(LinesmithError):
    """Raised for configuration-related problems."""
    pass

class StructuredInputError(LinesmithError):
    """Raised when the selected text is not valid JSON."""
    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"Invalid JSON at line {line}, column {column}: {message}")

class MacroNotFoundError(LinesmithError):
    """Raised when a macro name is not registered."""
    def __init__(self, name: str, available: list = None):
        self.name = name
        self.available = available or []
        super().__init__(f"Macro '{name}' not found.")

class DocumentError(LinesmithError):
    """Raised when a document cannot be read from or written to disk."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Document error for {file_path}: {message}")
