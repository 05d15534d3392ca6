"""Line-oriented host session that keeps one counter loaded between commands."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
import shlex

from .commands import parse_integer
from .config import TallyConfig
from .counter import CounterService
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import CounterError, InvalidArgumentError


logger = logging.getLogger(__name__)

__all__ = [
    "DOCUMENTATION",
    "EXECUTION_FAILURE",
    "EXECUTION_SUCCESS",
    "Session",
    "SessionExit",
    "usage",
]

EXECUTION_SUCCESS = 0
EXECUTION_FAILURE = 1

DOCUMENTATION = (
    "Simple counter builtin.",
    "",
    "Maintains a persistent counter value that can be manipulated.",
    "",
    "Options:",
    "  (no args)        Display current counter value",
    "  inc [n]          Increment counter by n (default: 1)",
    "  dec [n]          Decrement counter by n (default: 1)",
    "  set n            Set counter to specific value n",
    "  reset            Reset counter to 0",
    "  get              Display current counter value",
    "",
    "Exit Status:",
    "Returns success unless an invalid option or argument is given.",
)

_EXIT_WORDS = frozenset({"exit", "quit"})


def usage(command_name: str = "counter") -> str:
    """Return the one-line usage synopsis for the counter command."""
    return f"{command_name} [inc|dec|set|reset|get] [n]"


class SessionExit(Exception):
    """Raised internally when a session line asks to stop."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class Session:
    """Host a :class:`CounterService` across a sequence of command lines.

    A supplied service without its own emitter reports through the session's.
    """

    def __init__(
        self,
        service: CounterService | None = None,
        config: TallyConfig | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config or TallyConfig()
        self._emitter = emitter or NullEmitter()
        self._echo = echo or (lambda _line: None)
        self.service = service or CounterService(emitter=self._emitter)
        if isinstance(self.service.emitter, NullEmitter):
            self.service.emitter = self._emitter
        if self.service.echo is None:
            self.service.echo = lambda value: self._echo(str(value))
        self.last_status = EXECUTION_SUCCESS
        self.loaded = False

    def __enter__(self) -> Session:
        self.load()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unload()

    def load(self) -> None:
        self.service.counter.value = 0
        self.loaded = True
        if self.config.announce_lifecycle:
            self._echo("Counter builtin loaded. Initializing counter to 0.")
        self._emitter.event("counter_loaded", {"name": self.config.command_name})

    def unload(self) -> None:
        if not self.loaded:
            return
        self.loaded = False
        if self.config.announce_lifecycle:
            self._echo("Counter builtin unloaded.")
        self._emitter.event(
            "counter_unloaded",
            {"name": self.config.command_name, "value": self.service.value},
        )

    def run(self, lines: Iterable[str]) -> int:
        """Execute ``lines`` in order and return the final exit status."""
        for line in lines:
            try:
                self.execute_line(line)
            except SessionExit as stop:
                self.last_status = stop.status
                break
        return self.last_status

    def execute_line(self, line: str) -> int:
        """Execute one line, returning its exit status.

        Raises :class:`SessionExit` when the line is ``exit`` or ``quit``.
        """
        stripped = line.strip()
        if not stripped or stripped.startswith(self.config.comment_prefix):
            return self.last_status

        try:
            tokens = shlex.split(stripped, comments=False)
        except ValueError as exc:
            self._emitter.error(f"syntax error: {exc}", exc)
            return self._finish(EXECUTION_FAILURE)

        if tokens[0] in _EXIT_WORDS:
            raise SessionExit(self._exit_status(tokens[1:]))
        if tokens[0] == "help":
            self._echo(usage(self.config.command_name))
            for entry in DOCUMENTATION:
                self._echo(entry)
            return self._finish(EXECUTION_SUCCESS)

        if tokens[0] == self.config.command_name:
            tokens = tokens[1:]
        return self.execute(tokens)

    def execute(self, tokens: list[str]) -> int:
        """Run counter ``tokens``, reporting failures through the emitter."""
        try:
            self.service.run(tokens)
        except CounterError as exc:
            self._emitter.error(f"{self.config.command_name}: {exc}", exc)
            return self._finish(EXECUTION_FAILURE)
        return self._finish(EXECUTION_SUCCESS)

    def _exit_status(self, args: list[str]) -> int:
        if not args:
            return self.last_status
        try:
            status = parse_integer(args[0])
        except InvalidArgumentError as exc:
            self._emitter.error(f"exit: {exc}", exc)
            return EXECUTION_FAILURE
        return status & 0xFF

    def _finish(self, status: int) -> int:
        self.last_status = status
        return status

