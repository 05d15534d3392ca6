"""Typer application wiring for the tally CLI."""

from __future__ import annotations

from typing import Annotated

from rich.traceback import Traceback
import typer

from tally.core.config import load_config
from tally.core.exceptions import ConfigError
from tally.version import get_version

from ._options import ConfigOption, DebugOption, VerboseOption
from .commands.execute import exec_command
from .commands.shell import shell
from .commands.usage import usage
from .state import configure_logging, debug_enabled, emit_error, get_cli_state, set_cli_state


app = typer.Typer(
    help="Keep a counter you can increment, decrement, set, reset, and query.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit(code=0)


@app.callback()
def _app_root(
    ctx: typer.Context,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    config: ConfigOption = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Show the installed version and exit.",
        ),
    ] = False,
) -> None:
    ctx.obj = get_cli_state(ctx)
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    configure_logging(state)
    try:
        state.config = load_config(config)
    except ConfigError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


# Counter operands such as "-5" must reach the command untouched.
app.command(
    name="exec",
    context_settings={"ignore_unknown_options": True},
)(exec_command)
app.command(name="shell")(shell)
app.command(name="usage")(usage)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
