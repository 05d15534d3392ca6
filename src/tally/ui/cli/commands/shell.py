"""Interactive or scripted counter session."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

import typer

from tally.core.session import Session

from .._options import ScriptArgument
from ..diagnostics import CliEmitter
from ..state import CLIState, get_cli_state


def _stdin_is_interactive() -> bool:
    stream = sys.stdin
    if stream is None or stream.closed:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _prompt_lines(state: CLIState) -> Iterator[str]:
    """Yield lines typed at the prompt until end of input."""
    prompt = state.config.prompt
    while True:
        try:
            yield state.console.input(prompt, markup=False)
        except EOFError:
            state.console.print()
            return


def _script_lines(script: Path) -> Iterator[str]:
    with script.open(encoding="utf-8") as handle:
        yield from handle


def shell(ctx: typer.Context, script: ScriptArgument = None) -> None:
    """Execute counter command lines that share one counter.

    Lines may start with the counter command word (``counter inc 2``) or give
    the operation directly (``inc 2``). ``help`` prints the documentation and
    ``exit [status]`` ends the session. The exit status is that of the last
    command.
    """
    state = get_cli_state(ctx)
    if script is not None:
        lines: Iterator[str] = _script_lines(script)
    elif _stdin_is_interactive():
        lines = _prompt_lines(state)
    else:
        lines = iter(sys.stdin)

    with Session(config=state.config, emitter=CliEmitter(state), echo=typer.echo) as session:
        status = session.run(lines)
    if status:
        raise typer.Exit(code=status)
