"""
CLI Output Utilities

Machine mode prints minified JSON and plain text; human mode goes through rich.
"""

import json
import re
from typing import Any, List, Optional

import typer
from rich.console import Console as RichConsole

from linesmith.cli.config import CLIConfig

_MARKUP = re.compile(r'\[/?[a-z][^\]]*\]')


class MachineAwareConsole:
    """
    rich Console stand-in. In machine mode markup is stripped from strings
    and renderables (tables, syntax blocks) are skipped.
    """

    def __init__(self):
        self._rich_console = RichConsole()

    def print(self, *args, **kwargs):
        if not CLIConfig.is_machine_mode():
            self._rich_console.print(*args, **kwargs)
            return
        for arg in args:
            if isinstance(arg, str):
                plain = _MARKUP.sub('', arg).strip()
                if plain:
                    print(plain)


_console = MachineAwareConsole()


def print_json(data: Any, minified: Optional[bool] = None) -> None:
    """Minified JSON in machine mode, indented otherwise."""
    if minified is None:
        minified = CLIConfig.is_machine_mode()
    typer.echo(json.dumps(data, separators=(',', ':')) if minified else json.dumps(data, indent=2))


def print_error(code: str, message: str, input_value: Optional[str] = None,
                suggestions: Optional[List[str]] = None, as_json: bool = False) -> None:
    """
    Report a failed command.

    Machine mode and --json get {"status": "error", "code", "message"} plus
    "input" and "suggestions" when given; human mode gets a red message.
    """
    if CLIConfig.is_machine_mode() or as_json:
        error = {"status": "error", "code": code, "message": message}
        if input_value:
            error["input"] = input_value
        if suggestions:
            error["suggestions"] = suggestions
        print_json(error, minified=True)
        return

    _console.print(f"[red]Error: {message}[/red]")
    if suggestions:
        _console.print(f"[dim]Suggestions: {', '.join(suggestions)}[/dim]")


def get_console() -> MachineAwareConsole:
    return _console
