"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


COUNTER_PANEL = "Counter"
DIAGNOSTICS_PANEL = "Diagnostics"

TokensArgument = Annotated[
    list[str] | None,
    typer.Argument(
        metavar="[OPERATION] [N]",
        help="Counter operation (inc, dec, set, reset, get) or an integer literal, then its operand.",
        show_default=False,
        rich_help_panel=COUNTER_PANEL,
    ),
]

ScriptArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="[SCRIPT]",
        help="File of counter command lines. Reads standard input when omitted.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        show_default=False,
        rich_help_panel=COUNTER_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug/--no-debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="YAML configuration file (defaults to $TALLY_CONFIG when set).",
        dir_okay=False,
        show_default=False,
    ),
]
