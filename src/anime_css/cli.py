"""CLI interface for anime-css."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .constants import DEFAULT_INDENT, INDENT_ENV_VAR
from .errors import AnimeCSSError
from .loader import timeline_from_definition
from .timeline import Timeline

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    definition: str = typer.Argument(
        None, help="Timeline definition JSON file ('-' reads from stdin)"
    ),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the generated CSS to this file instead of stdout",
    ),
    name: str = typer.Option(
        None,
        "--name",
        "-n",
        help="Override the timeline name used in generated animation names",
    ),
    indent: str = typer.Option(
        DEFAULT_INDENT,
        "--indent",
        envvar=INDENT_ENV_VAR,
        help="Indent unit of the formatted CSS",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log how keyframes are resolved and compiled",
    ),
) -> None:
    """
    Compile a timeline definition into static CSS keyframes.

    Examples:
      # Print the CSS
      anime-css spinner.json

      # Save it next to the page
      anime-css spinner.json --output spinner.css
    """
    _configure_logging(verbose)
    try:
        if not definition:
            raise CLIError("Timeline definition file is required")

        document = _load_definition_from_file(definition)
        if name:
            if not isinstance(document, dict):
                raise CLIError("Timeline definition must be a JSON object")
            document = {**document, "name": name}

        stylesheet = _compile(document, indent)

        if output:
            _save_css_to_file(stylesheet, output)
        else:
            typer.echo(stylesheet, nl=False)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(e))}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_definition_from_file(file_path: str) -> Any:
    """Load a timeline definition from a JSON file or stdin."""
    try:
        if file_path == "-":
            return json.load(sys.stdin)
        with open(file_path, "r") as f:
            return json.load(f)
    except FileNotFoundError:
        raise CLIError(f"File '{file_path}' not found")
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON in '{file_path}': {e}")


def _compile(document: Any, indent: str) -> str:
    """Build the timeline and compile it, turning library errors into CLI errors."""
    try:
        tl: Timeline = timeline_from_definition(document)
        return tl.into_css(indent)
    except AnimeCSSError as e:
        raise CLIError(f"{type(e).__name__}: {e}")


def _save_css_to_file(stylesheet: str, file_path: str) -> None:
    """Save generated CSS to a file."""
    try:
        Path(file_path).write_text(stylesheet)
        console.print(f"[green]✓[/green] CSS saved to {file_path}")
    except IOError as e:
        raise CLIError(f"Failed to save file '{file_path}': {e}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
