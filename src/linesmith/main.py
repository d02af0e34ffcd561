import typer

from linesmith import __version__
from linesmith.logging_config import setup_logging
from linesmith.cli import macros
from linesmith.cli.config import CLIConfig

app = typer.Typer()


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: pretty output with tables and colors (also via LINESMITH_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log macro decisions at DEBUG level"),
):
    """
    Linesmith: editor text-transformation macros for JavaScript/TypeScript.

    Machine mode is DEFAULT (JSON output, no console logging).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)

    # Console logging stays off unless asked for, stdout carries the results
    setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=not verbose, force=True)


app.command(name="list")(macros.list_cmd)
app.command(name="run")(macros.run_cmd)


@app.command()
def version():
    """
    Prints the current version of Linesmith.
    """
    typer.echo(f"Linesmith v{__version__}")


if __name__ == "__main__":
    app()
