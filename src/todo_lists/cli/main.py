# src/todo_lists/cli/main.py

"""
CLI entrypoint.

Every command is one run-to-completion step:
load the state file -> perform one operation -> save (only if it succeeded).
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path

import click

from ..config import Settings, get_settings
from ..core.errors import TodoError
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks import task_api
from .bootstrap import create_initial_state
from .render import format_list, format_lists

logger = logging.getLogger(__name__)


class CommandFailed(click.ClickException):
    """TodoError wrapped for click: prints 'Error: ...' and sets the exit code."""

    def __init__(self, err: TodoError) -> None:
        super().__init__(str(err))
        # 1: bad input, 2: the state file or the disk is the problem.
        self.exit_code = 2 if err.environmental else 1


@contextlib.contextmanager
def _session(ctx: click.Context, *, save: bool = True) -> Iterator[AppState]:
    try:
        state = create_initial_state(settings=ctx.obj)
        yield state
        if save:
            task_api.commit(state)
    except TodoError as exc:
        if exc.environmental:
            logger.error("%s", exc, exc_info=True)
        else:
            logger.debug("Command rejected: %s", exc)
        raise CommandFailed(exc) from exc


@click.group()
@click.option(
    "--state-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file to use instead of $TODO_STATE_PATH / ~/.todo/lists.json.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(package_name="todo-lists")
@click.pass_context
def cli(ctx: click.Context, state_file: Path | None, verbose: bool) -> None:
    """Keep named todo lists; one of them is always focused."""
    settings: Settings = ctx.obj if isinstance(ctx.obj, Settings) else get_settings()
    if state_file is not None:
        settings = settings.with_state_path(state_file)
    ctx.obj = settings

    if verbose:
        console_level = logging.DEBUG
    else:
        console_level = getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    setup_logging(
        log_file=settings.log_path if settings.log_to_file else None,
        console_level=console_level,
    )
    logger.debug("%s using state file %s", settings.app_name, settings.state_path)


# ---- lists ----


@cli.command("create")
@click.argument("name")
@click.pass_context
def create_cmd(ctx: click.Context, name: str) -> None:
    """Create a new list (the first list becomes focused)."""
    with _session(ctx) as state:
        task_api.create_list(state, name)
        focused = state.store.focused == name
    click.echo(f"Created list '{name}'" + (" (focused)" if focused else ""))


@cli.command("delete")
@click.argument("name")
@click.option("-y", "--yes", is_flag=True, help="Skip the retype-the-name confirmation.")
@click.pass_context
def delete_cmd(ctx: click.Context, name: str, yes: bool) -> None:
    """Delete a list after confirming its name."""
    with _session(ctx) as state:
        todo = task_api.get_list(state, name)
        if not yes:
            typed = click.prompt(
                f"Please confirm deletion of '{todo.name}' ({len(todo)} task(s)) "
                "by re-typing the list name",
                default="",
                show_default=False,
            )
            if typed.strip() != todo.name:
                raise click.ClickException(
                    f"Entered name {typed.strip()!r} does not match {todo.name!r}; nothing deleted."
                )
        focused = task_api.delete_list(state, name)
    click.echo(f"Deleted list '{name}'")
    if focused is not None:
        click.echo(f"Focused list: '{focused}'")


@cli.command("focus")
@click.argument("name")
@click.pass_context
def focus_cmd(ctx: click.Context, name: str) -> None:
    """Make NAME the list that task commands use by default."""
    with _session(ctx) as state:
        task_api.focus_list(state, name)
    click.echo(f"Focused list: '{name}'")


@cli.command("lists")
@click.pass_context
def lists_cmd(ctx: click.Context) -> None:
    """Show all lists; '*' marks the focused one."""
    with _session(ctx, save=False) as state:
        pairs = task_api.list_lists(state)
    click.echo(format_lists(pairs))


# ---- tasks ----


@cli.command("view")
@click.argument("name", required=False)
@click.option("-a", "--all", "show_all", is_flag=True, help="Show every list.")
@click.pass_context
def view_cmd(ctx: click.Context, name: str | None, show_all: bool) -> None:
    """Show the tasks of NAME (default: the focused list).

    The numbers printed are the ones drop/complete/uncomplete expect.
    """
    with _session(ctx, save=False) as state:
        sections = task_api.list_tasks(state, name=name, show_all=show_all)
    if not sections:
        click.echo(format_lists([]))
        return
    click.echo("\n\n".join(format_list(n, rows) for n, rows in sections))


@cli.command("add")
@click.argument("descriptions", nargs=-1, required=True)
@click.option("-d", "--date", "date_text", help="Due date: MM/DD, MM/DD/YY or MM/DD/YYYY.")
@click.option("-l", "--list", "list_name", help="Target list (default: the focused list).")
@click.pass_context
def add_cmd(
    ctx: click.Context, descriptions: tuple[str, ...], date_text: str | None, list_name: str | None
) -> None:
    """Add one task per DESCRIPTION, all sharing the same optional due date.

    Examples:
        todo add 'proj 1'
        todo add 'task1 for this class' 'task2 for other class' --date 4/30
    """
    with _session(ctx) as state:
        added = task_api.add_tasks(state, list(descriptions), date_text=date_text, list_name=list_name)
    click.echo(f"Added {len(added)} task(s)")


def _index_command(name: str, op, verb: str, help_text: str) -> None:
    @cli.command(name, help=help_text)
    @click.argument("indices", nargs=-1, required=True, type=int)
    @click.option("-l", "--list", "list_name", help="Target list (default: the focused list).")
    @click.pass_context
    def _cmd(ctx: click.Context, indices: tuple[int, ...], list_name: str | None) -> None:
        with _session(ctx) as state:
            changed = op(state, indices, list_name=list_name)
        click.echo(f"{verb} {len(changed)} task(s)")


_index_command(
    "drop",
    task_api.drop_tasks,
    "Dropped",
    "Remove tasks by the numbers shown in 'todo view'.",
)
_index_command(
    "complete",
    task_api.complete_tasks,
    "Completed",
    "Mark tasks done by the numbers shown in 'todo view'.",
)
_index_command(
    "uncomplete",
    task_api.uncomplete_tasks,
    "Reopened",
    "Mark tasks not done by the numbers shown in 'todo view'.",
)


def main() -> None:
    cli(prog_name="todo")


if __name__ == "__main__":
    main()
