"""
Macro registry: the static, ordered list of available macros.

Priority only orders presentation. Macros never compose; each run is
independent.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from linesmith.editor import EditorHost
from linesmith.exceptions import MacroNotFoundError
from linesmith.logging_config import logger
from linesmith.schemas import MacroResult
from .facade import MacroFacade


@dataclass(frozen=True)
class MacroDescriptor:
    """A named macro and the facade coroutine that runs it."""
    name: str
    priority: int
    operation: Callable[[MacroFacade], Awaitable[MacroResult]]
    description: str = ""


MACROS = (
    MacroDescriptor(
        "ConvertToDestructuredObjectInput", 2, MacroFacade.convert_to_destructured_input,
        "Turn 'a: string, b: number' into a destructured object parameter",
    ),
    MacroDescriptor(
        "SplitLineToMultiLine", 1, MacroFacade.split_line_to_multiline,
        "Expand the object literals on the current line over several lines",
    ),
    MacroDescriptor(
        "ConvertStringToSingleQuotes", 3, MacroFacade.convert_string_to_single_quotes,
        "Change the template string around the cursor to single quotes",
    ),
    MacroDescriptor(
        "ConvertStringToBackticks", 4, MacroFacade.convert_string_to_backticks,
        "Change the single-quoted string around the cursor to backticks",
    ),
    MacroDescriptor(
        "ConvertJsonToJavascript", 5, MacroFacade.convert_json_to_javascript,
        "Replace the selected JSON with an object literal",
    ),
    MacroDescriptor(
        "LogMessage", 6, MacroFacade.log_message,
        "Insert a log statement for the enclosing class and method",
    ),
)


def list_macros() -> List[MacroDescriptor]:
    """Registered macros in presentation order."""
    return sorted(MACROS, key=lambda m: m.priority)


def get_macro(name: str) -> MacroDescriptor:
    """
    Look up a macro by name, ignoring case.

    Raises:
        MacroNotFoundError: If no macro has that name.
    """
    for descriptor in MACROS:
        if descriptor.name.lower() == name.lower():
            return descriptor
    raise MacroNotFoundError(name, [m.name for m in list_macros()])


async def run_macro(
    name: str,
    host: EditorHost,
    config: Optional[Dict[str, Any]] = None,
) -> MacroResult:
    """Run one macro by name against a host."""
    descriptor = get_macro(name)
    logger.info(f"Running macro {descriptor.name}")
    return await descriptor.operation(MacroFacade(host, config))
