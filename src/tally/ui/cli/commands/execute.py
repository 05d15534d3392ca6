"""One-shot execution of a single counter command."""

from __future__ import annotations

import typer

from tally.core.session import EXECUTION_SUCCESS, Session

from .._options import TokensArgument
from ..diagnostics import CliEmitter
from ..state import get_cli_state


def exec_command(ctx: typer.Context, tokens: TokensArgument = None) -> None:
    """Run one counter command on a fresh counter and print the resulting value."""
    state = get_cli_state(ctx)
    session = Session(config=state.config, emitter=CliEmitter(state), echo=typer.echo)
    with session:
        status = session.execute(list(tokens or []))
    if status != EXECUTION_SUCCESS:
        raise typer.Exit(code=status)
