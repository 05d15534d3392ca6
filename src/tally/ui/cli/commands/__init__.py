"""CLI command implementations exposed via `tally.ui.cli`."""

from __future__ import annotations

from .execute import exec_command
from .shell import shell
from .usage import usage


__all__ = ["exec_command", "shell", "usage"]
