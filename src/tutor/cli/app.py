"""
Root Typer application for the tutor CLI.

The whole command surface is one optional positional token:

- nothing      → usage on stderr, exit 0
- ``list``     → lesson table on stdout, exit 0
- anything else → a selector (number or slug); the lesson runs, exit 0,
  or ``Error: Lesson '<token>' not found`` plus usage on stderr, exit 1

Options are not parsed: a token such as ``-1``, ``--help`` or ``--`` is
just another selector. The command reads the raw argument list before
Click's parser sees it, since Click would consume ``--`` as its
end-of-options marker.
"""

from __future__ import annotations

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from tutor.core.errors import SelectionNotFoundError
from tutor.core.logging import configure_logging, get_logger
from tutor.core.settings import TutorSettings, get_settings
from tutor.framework.dispatcher import LessonDispatcher
from tutor.framework.lister import render_listing
from tutor.framework.registry import get_registry

LIST_COMMAND = "list"
RAW_TOKENS_KEY = "tutor.raw_tokens"

USAGE = """\
Usage:
  tutor list
  tutor <lesson>

Examples:
  tutor list           # list all lessons
  tutor hello_world    # run a lesson by slug
  tutor 1              # run a lesson by number"""

err_console = Console(stderr=True)
log = get_logger(__name__)

app = typer.Typer(
    name="tutor",
    help="tutor: run self-contained Python language lessons.",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


class RawTokenCommand(TyperCommand):
    """Command that keeps the untouched argument list in ``ctx.meta``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_TOKENS_KEY] = list(args)
        return super().parse_args(ctx, args)


def print_usage() -> None:
    """Write the usage text to stderr."""
    err_console.print(USAGE, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _configure_from_settings() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        # Invalid diagnostics config falls back to defaults.
        defaults = TutorSettings.model_construct()
        configure_logging(level=defaults.log_level, json_format=defaults.log_json)
        log.warning(
            "settings.invalid",
            error_count=e.error_count(),
            fields=[".".join(str(loc) for loc in err["loc"]) for err in e.errors()],
        )
        return
    configure_logging(level=settings.log_level, json_format=settings.log_json)


@app.command(
    cls=RawTokenCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def tutor(ctx: typer.Context) -> None:
    """List lessons, or run one by number or slug."""
    _configure_from_settings()

    tokens = ctx.meta.get(RAW_TOKENS_KEY, [])
    if not tokens:
        print_usage()
        return
    selector = tokens[0]

    registry = get_registry()

    if selector == LIST_COMMAND:
        render_listing(registry)
        return

    dispatcher = LessonDispatcher(registry)
    try:
        dispatcher.submit(selector)
    except SelectionNotFoundError as e:
        # Only a miss on this token is a usage error.
        if e.context.get("selector") != selector:
            raise
        log.debug("cli.selection_failed", **e.to_dict())
        err_console.print(
            f"[bold red]Error[/bold red]: {escape(e.message)}", emoji=False, highlight=False, soft_wrap=True
        )
        print_usage()
        raise typer.Exit(code=1) from e


def main() -> None:
    """Console-script entry point."""
    app(prog_name="tutor")
