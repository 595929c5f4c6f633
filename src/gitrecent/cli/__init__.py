"""CLI entry point for git-recent.

Uses Typer for command routing with lazy loading so that `list` and
`status` never import the terminal UI.
"""

from typing import Callable, Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="git-recent",
    help="Check out a recently used git branch",
    no_args_is_help=False,
)


def _run(handler: Callable[[], object]) -> None:
    """Run a command handler, reporting git-recent errors once."""
    from gitrecent.utils.debug import log_error
    from gitrecent.utils.exceptions import GitRecentError

    try:
        handler()
    except GitRecentError as e:
        from gitrecent.cli.ui.console import print_error

        log_error("cli", str(e), e)
        print_error(str(e))
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    max_branches: Optional[int] = typer.Option(
        None,
        "--max",
        "-n",
        help="Maximum number of branches to consider",
    ),
    visible: Optional[int] = typer.Option(
        None,
        "--visible",
        "-v",
        help="Number of branches shown at once",
    ),
) -> None:
    """Pick a recent branch if no command given."""
    if ctx.invoked_subcommand is None:
        from gitrecent.cli.commands import cmd_pick

        _run(lambda: cmd_pick(max_branches, visible))


@app.command("list")
def list_branches(
    max_branches: Optional[int] = typer.Option(
        None, "--max", "-n", help="Maximum number of branches to list"
    ),
) -> None:
    """List recent branches without the menu."""
    from gitrecent.cli.commands import cmd_list

    _run(lambda: cmd_list(max_branches))


@app.command()
def status() -> None:
    """Show current configuration."""
    from gitrecent.cli.commands import cmd_status

    cmd_status()


@app.command()
def debug(
    state: str = typer.Argument(..., help="on or off"),
) -> None:
    """Turn debug logging on or off."""
    from gitrecent.cli.commands import cmd_debug

    if state not in ("on", "off"):
        from gitrecent.cli.ui.console import print_error

        print_error(f"Expected 'on' or 'off', got '{state}'")
        raise typer.Exit(code=2)
    cmd_debug(state == "on")
