"""Shared Rich consoles for user-facing output."""

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Report an error once on stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def write_raw(text: str) -> None:
    """Write control sequences untouched by Rich markup or wrapping."""
    console.file.write(text)
    console.file.flush()
