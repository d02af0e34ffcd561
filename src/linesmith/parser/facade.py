from pathlib import Path
from typing import List, Union

from linesmith.logging_config import logger
from linesmith.schemas import DocumentSymbol
from .config import SUPPORTED_LANGUAGES
from .javascript_parser import parse_javascript_symbols


def parse_symbols(file_path: Union[str, Path], content: str) -> List[DocumentSymbol]:
    """
    Symbol forest for a document.

    Acts as the symbol provider for file-backed hosts, choosing the
    scanner from the file extension. Unsupported files have no symbols.
    """
    language = SUPPORTED_LANGUAGES.get(Path(str(file_path)).suffix.lower())

    if not language:
        logger.debug(f"No symbol provider for {file_path}")
        return []

    logger.debug(f"Scanning symbols of {file_path} as {language}")
    return parse_javascript_symbols(content, language)
