"""
CLI Macro Commands

list, run
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from linesmith.editor import FileEditorHost
from linesmith.exceptions import (
    ConfigError,
    DocumentError,
    LinesmithError,
    MacroNotFoundError,
    StructuredInputError,
)
from linesmith.logging_config import logger
from linesmith.macros import get_macro_config, list_macros, run_macro
from linesmith.schemas import Selection
from .config import CLIConfig
from .output import get_console, print_error, print_json

console = get_console()

ERROR_CODES = {
    MacroNotFoundError: "MACRO_NOT_FOUND",
    StructuredInputError: "INVALID_JSON",
    DocumentError: "DOCUMENT_ERROR",
    ConfigError: "CONFIG_ERROR",
}


def _fail(error: LinesmithError, json_output: bool, input_value: Optional[str] = None) -> None:
    code = ERROR_CODES.get(type(error), "LINESMITH_ERROR")
    suggestions = error.available if isinstance(error, MacroNotFoundError) else None
    logger.error(f"{code}: {error}")
    print_error(code, str(error), input_value=input_value, suggestions=suggestions, as_json=json_output)
    raise typer.Exit(code=1)


def list_cmd(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List the available macros in presentation order.
    """
    macros = list_macros()

    if json_output or CLIConfig.is_machine_mode():
        print_json([
            {"name": m.name, "priority": m.priority, "description": m.description}
            for m in macros
        ])
        return

    table = Table(title="Macros")
    table.add_column("#", justify="right", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="green")
    for m in macros:
        table.add_row(str(m.priority), m.name, m.description)
    console.print(table)


def run_cmd(
    macro: str = typer.Argument(..., help="Macro name (see 'linesmith list')"),
    file: Path = typer.Argument(..., help="File to run the macro on", exists=True, dir_okay=False),
    line: int = typer.Option(..., "--line", "-l", min=1, help="Cursor line (1-based)"),
    char: int = typer.Option(0, "--char", "-c", min=0, help="Cursor character offset in the line (0-based)"),
    end_line: Optional[int] = typer.Option(None, "--end-line", min=1, help="Selection end line (1-based)"),
    end_char: Optional[int] = typer.Option(None, "--end-char", min=0, help="Selection end character (0-based, exclusive)"),
    indent_size: Optional[int] = typer.Option(None, "--indent-size", min=1, help="Spaces per indent level"),
    write: bool = typer.Option(False, "--write", "-w", help="Save the edited file (a backup is taken first)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Run one macro on a file at the given cursor or selection.

    Without --end-line the selection is the cursor itself; with --end-line
    and no --end-char it extends to the end of that line.
    """
    try:
        config = get_macro_config()
        if indent_size is not None:
            config["indent_size"] = indent_size

        host = FileEditorHost(file)
        document = host.document

        last_line = end_line if end_line is not None else line
        if not (line <= last_line <= document.line_count):
            print_error(
                "INVALID_POSITION",
                f"Lines {line}-{last_line} are outside the file ({document.line_count} lines)",
                input_value=str(file),
                as_json=json_output,
            )
            raise typer.Exit(code=1)

        if end_char is None:
            end_char = char if end_line is None else len(document.line_at(last_line - 1))
        host.select(Selection(start_line=line - 1, start_char=char, end_line=last_line - 1, end_char=end_char))

        result = asyncio.run(run_macro(macro, host, config))

        backup_path = None
        if write and result.success:
            backup_path = host.save()
    except LinesmithError as e:
        _fail(e, json_output, input_value=macro)

    cursor_line, cursor_char = host.cursor

    if json_output or CLIConfig.is_machine_mode():
        payload = result.model_dump(mode="json")
        payload["file"] = str(file)
        payload["cursor"] = {"line": cursor_line, "char": cursor_char}
        payload["written"] = write and result.success
        payload["backup_path"] = backup_path
        print_json(payload)
        return

    if not result.success:
        console.print(f"[yellow]{escape(result.message or 'Nothing to do.')}[/yellow]")
        return

    console.print(f"[green]✓ {result.macro}[/green] [dim]{escape(str(file))}:{result.selection.start_line + 1}[/dim]")
    console.print(Syntax(result.replacement, "javascript", theme="ansi_dark"))
    if write:
        console.print(f"[dim]Saved {escape(str(file))}" + (f" (backup: {escape(backup_path)})" if backup_path else "") + "[/dim]")
    else:
        console.print("[dim]Dry run: pass --write to save the file.[/dim]")
