"""CLI command handlers."""

from typing import TYPE_CHECKING, Optional, TextIO

from gitrecent.core.base import BranchSource
from gitrecent.core.keys import KeyReader
from gitrecent.core.model import ListModel
from gitrecent.utils.config import Config, get_gitrecent_dir
from gitrecent.utils.constants import MAX_BRANCHES, Ansi
from gitrecent.utils.debug import debug, debug_git
from gitrecent.utils.exceptions import CommitActionError, RetrievalError

if TYPE_CHECKING:
    from gitrecent.cli.ui.terminal import RawModeGuard


def load_config(
    max_branches: Optional[int] = None, visible: Optional[int] = None
) -> Config:
    """Load config and apply per-run overrides.

    ``max_branches`` is capped at MAX_BRANCHES.

    Raises:
        ConfigurationError: If a limit is not an integer or is below one
    """
    config = Config(get_gitrecent_dir())
    if max_branches is not None:
        config.max_branches = max_branches
    if visible is not None:
        config.visible_branches = visible
    config.validate()
    if config.max_branches > MAX_BRANCHES:
        debug("config", "Capping max_branches", requested=config.max_branches)
        config.max_branches = MAX_BRANCHES
    return config


def current_branch_or_empty(source: BranchSource) -> str:
    """Current branch, or "" when git cannot tell us."""
    try:
        return source.current_item()
    except RetrievalError as e:
        debug_git("Current branch unknown", error=e)
        return ""


def checkout_selected(model: ListModel, source: BranchSource) -> str:
    """Check out the selected branch and move it to the front.

    Raises:
        CommitActionError: If the checkout fails; the list is left as is
    """
    from gitrecent.cli.ui import console, write_raw

    chosen = model.selected_item
    write_raw(Ansi.CLEAR_SCREEN + "\n")
    console.print(f"\nChecking out branch: {chosen}", markup=False)
    write_raw(Ansi.COLUMN_START)

    status = source.apply(chosen)
    if status != 0:
        raise CommitActionError(
            f"git checkout {chosen} failed: exit status {status}", returncode=status
        )

    model.promote(chosen)
    return chosen


def cmd_pick(
    max_branches: Optional[int] = None,
    visible: Optional[int] = None,
    source: Optional[BranchSource] = None,
    reader: Optional[KeyReader] = None,
    out: Optional[TextIO] = None,
    guard: Optional["RawModeGuard"] = None,
) -> Optional[ListModel]:
    """Pick a recent branch interactively and check it out.

    Returns the list model after the interaction, or None when there was
    nothing to pick from.

    Raises:
        RetrievalError: If branches cannot be listed
        CommitActionError: If the checkout fails
    """
    from gitrecent.cli.ui import SelectionController, console
    from gitrecent.core.git import GitBranchSource

    config = load_config(max_branches, visible)
    source = source or GitBranchSource()

    branches = source.list_recent(config.max_branches)
    if not branches:
        console.print("No branches found")
        return None

    model = ListModel(
        branches,
        active=current_branch_or_empty(source),
        window_size=config.visible_branches,
    )
    controller = SelectionController(model, reader=reader, out=out, guard=guard)
    chosen = controller.run()
    debug("pick", "Selection finished", state=controller.state.value, chosen=chosen)

    if chosen is not None:
        checkout_selected(model, source)
    return model


def cmd_list(
    max_branches: Optional[int] = None, source: Optional[BranchSource] = None
) -> None:
    """Print recent branches, marking the current one."""
    from rich.markup import escape

    from gitrecent.cli.ui import console
    from gitrecent.core.git import GitBranchSource

    config = load_config(max_branches)
    source = source or GitBranchSource()

    branches = source.list_recent(config.max_branches)
    if not branches:
        console.print("No branches found")
        return

    current = current_branch_or_empty(source)
    for name in branches:
        if current and name == current:
            console.print(f"[green]* {escape(name)}[/green]")
        else:
            console.print(f"  {escape(name)}")


def cmd_status() -> None:
    """Show config location, limits and debug state."""
    from gitrecent.cli.ui import console

    gitrecent_dir = get_gitrecent_dir()
    config = Config(gitrecent_dir)

    console.print(f"[bold]Config:[/bold] [dim]{gitrecent_dir}[/dim]")
    console.print(f"[bold]Max branches:[/bold] {config.max_branches}")
    console.print(f"[bold]Visible branches:[/bold] {config.visible_branches}")

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )


def cmd_debug(enabled: bool) -> None:
    """Toggle debug logging."""
    from gitrecent.cli.ui import console
    from gitrecent.utils.debug import reload_config

    config = Config(get_gitrecent_dir())
    config.set_debug(enabled)
    reload_config()

    if enabled:
        console.print(f"[green]Debug on[/green] [dim]({config.log_path})[/dim]")
    else:
        console.print("[yellow]Debug off[/yellow]")
