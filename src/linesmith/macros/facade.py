"""
MacroFacade: runs the editor macros against an editor host.

Each macro reads the active document and selection, hands the text to
the pure scanners, and writes the result back through the host. Only
the symbol request and the edit itself suspend.
"""

from typing import Any, Dict, Optional

from linesmith.editor import EditorHost
from linesmith.logging_config import logger
from linesmith.schemas import MacroResult, Selection
from .config import MACRO_CONFIG, NO_EDITOR_MESSAGE, NO_LOGGER_MESSAGE, validate_macro_config
from .destructure import convert_to_destructured_input
from .indent import compute_indent_level
from .logger_context import build_log_prefix, build_log_statement, scan_logger_context
from .printer import convert_json_to_literal
from .quotes import BACKTICK, SINGLE_QUOTE, swap_string_quotes
from .reformatter import split_line_to_multiline
from .resolver import find_enclosing_class, find_innermost_container


class MacroFacade:
    """
    Entry point for macro runs.

    One coroutine per macro; each returns a MacroResult. A result with
    success=False and a message is an informational stop: nothing was
    edited and nothing went wrong.
    """

    def __init__(self, host: EditorHost, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the facade.

        Args:
            host: Editor host providing the document, selection and edits
            config: Optional overrides of MACRO_CONFIG

        Raises:
            ConfigError: If the merged config is invalid.
        """
        self.host = host
        self.config = {**MACRO_CONFIG, **(config or {})}
        validate_macro_config(self.config)

    @property
    def indent_size(self) -> int:
        return self.config["indent_size"]

    def _stop(self, macro: str, message: str) -> MacroResult:
        logger.info(f"{macro}: {message}")
        return MacroResult(macro=macro, success=False, message=message)

    async def _replace(self, macro: str, selection: Selection, text: str) -> MacroResult:
        applied = await self.host.apply_edit(selection, text)
        if not applied:
            logger.warning(f"{macro}: the editor rejected the edit")
            return MacroResult(macro=macro, success=False, message="The edit could not be applied.")
        logger.info(f"{macro}: replaced lines {selection.start_line}-{selection.end_line}")
        return MacroResult(macro=macro, success=True, replacement=text, selection=selection)

    async def split_line_to_multiline(self) -> MacroResult:
        """Expand the object literals on the cursor's line."""
        macro = "SplitLineToMultiLine"
        document = self.host.active_document()
        if document is None:
            return self._stop(macro, NO_EDITOR_MESSAGE)

        line_index = self.host.selection().start_line
        line = document.line_at(line_index)
        formatted = split_line_to_multiline(line, self.indent_size)
        if formatted is None:
            return self._stop(macro, "No object literal to split on this line.")

        return await self._replace(macro, Selection.whole_line(line_index, len(line)), formatted)

    async def convert_to_destructured_input(self) -> MacroResult:
        """Rewrite the selected parameter list as a destructured object parameter."""
        macro = "ConvertToDestructuredObjectInput"
        document = self.host.active_document()
        if document is None:
            return self._stop(macro, NO_EDITOR_MESSAGE)

        selection = self.host.selection()
        text = document.get_text(selection)
        if not text.strip():
            return self._stop(macro, "Select the parameters to convert.")

        return await self._replace(macro, selection, convert_to_destructured_input(text))

    async def convert_string_to_single_quotes(self) -> MacroResult:
        return await self._swap_quotes("ConvertStringToSingleQuotes", SINGLE_QUOTE)

    async def convert_string_to_backticks(self) -> MacroResult:
        return await self._swap_quotes("ConvertStringToBackticks", BACKTICK)

    async def _swap_quotes(self, macro: str, replace_with: str) -> MacroResult:
        document = self.host.active_document()
        if document is None:
            return self._stop(macro, NO_EDITOR_MESSAGE)

        selection = self.host.selection()
        line = document.line_at(selection.start_line)
        swapped = swap_string_quotes(line, selection.start_char, replace_with)
        if swapped is None:
            return self._stop(macro, "The cursor is not inside a string to convert.")

        return await self._replace(macro, Selection.whole_line(selection.start_line, len(line)), swapped)

    async def convert_json_to_javascript(self) -> MacroResult:
        """
        Replace selected JSON with an equivalent object literal.

        Raises:
            StructuredInputError: If the selection is not valid JSON.
        """
        macro = "ConvertJsonToJavascript"
        document = self.host.active_document()
        if document is None:
            return self._stop(macro, NO_EDITOR_MESSAGE)

        selection = self.host.selection()
        base_level = compute_indent_level(document.line_at(selection.start_line), self.indent_size)
        literal = convert_json_to_literal(document.get_text(selection), self.indent_size, base_level)

        return await self._replace(macro, selection, literal)

    async def log_message(self) -> MacroResult:
        """
        Insert a log statement prefixed with the enclosing class and method.

        The cursor ends up inside the message quotes.
        """
        macro = "LogMessage"
        document = self.host.active_document()
        if document is None:
            return self._stop(macro, NO_EDITOR_MESSAGE)

        details = scan_logger_context(
            document.lines(),
            self.config["logger_init_markers"],
            self.config["logger_prefix_marker"],
        )
        if details is None:
            return self._stop(macro, NO_LOGGER_MESSAGE)
        logger.debug(f"Logger details: {details.model_dump()}")

        selection = self.host.selection()
        symbols = await self.host.document_symbols(document)

        container = find_innermost_container(symbols, selection.start_line)
        method_name = container.name if container else None
        class_name = None
        if not details.has_explicit_prefix:
            enclosing_class = find_enclosing_class(symbols, selection.start_line)
            class_name = enclosing_class.name if enclosing_class else None

        prefix = build_log_prefix(method_name, class_name, details.has_explicit_prefix)
        statement = build_log_statement(details.usage_receiver, prefix, self.config["log_level_method"])

        result = await self._replace(macro, selection, statement)
        if result.success:
            offset = self.config["log_cursor_offset"]
            await self.host.move_cursor("left", offset)
            result.cursor_offset = offset
        return result
