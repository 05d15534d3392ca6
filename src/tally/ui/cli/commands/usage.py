"""Describe the counter command surface."""

from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from tally.core.session import usage as usage_line

from ..state import get_cli_state


_OPERATIONS = (
    ("(none)", "-", "Display the current value"),
    ("inc, increment", "[n] (default 1)", "Add n to the counter"),
    ("dec, decrement", "[n] (default 1)", "Subtract n from the counter"),
    ("set", "n", "Set the counter to n"),
    ("reset", "-", "Set the counter to 0"),
    ("get", "-", "Display the current value"),
    ("<integer>", "-", "Set the counter to the literal"),
)


def usage() -> None:
    """Print the counter synopsis and a table of supported operations."""
    state = get_cli_state()
    console = state.console
    console.print(f"Usage: {usage_line(state.config.command_name)}", markup=False)
    console.print("Maintains a persistent counter value that can be manipulated.")

    table = Table(
        title="Operations",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Command")
    table.add_column("Arguments")
    table.add_column("Effect")
    for command, arguments, effect in _OPERATIONS:
        table.add_row(Text(command), Text(arguments), Text(effect))
    console.print(table)
    console.print("Returns success unless an invalid option or argument is given.")
