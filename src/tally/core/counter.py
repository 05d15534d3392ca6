"""The counter cell and the service that mutates it."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging
from threading import Lock

from .commands import COUNTER_MAX, COUNTER_MIN, Command, Operation, parse_command, parse_integer
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import CounterOverflowError, InvalidArgumentError, MissingArgumentError


logger = logging.getLogger(__name__)

__all__ = ["Counter", "CounterService"]

EchoSink = Callable[[int], None]


@dataclass(slots=True)
class Counter:
    """Single mutable integer owned by a :class:`CounterService`."""

    value: int = 0


class CounterService:
    """Execute counter commands against one :class:`Counter`.

    Each successful command returns the resulting value and hands it to the
    ``echo`` sink. Parsing and range checks happen before the cell is touched,
    so a rejected command never changes the value.
    """

    def __init__(
        self,
        counter: Counter | None = None,
        *,
        echo: EchoSink | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.counter = counter if counter is not None else Counter()
        self.echo = echo
        self.emitter = emitter or NullEmitter()
        self._lock = Lock()

    @property
    def value(self) -> int:
        return self.counter.value

    def run(self, tokens: Sequence[str]) -> int:
        """Parse textual tokens and execute the resulting command."""
        return self.execute(parse_command(tokens))

    def execute(self, command: Command) -> int:
        """Apply ``command`` and echo the resulting value."""
        with self._lock:
            previous = self.counter.value
            value = self._apply(command, previous)
            self.counter.value = value

        if command.operation not in (Operation.QUERY, Operation.GET):
            logger.debug("%s %s: %d -> %d", command.operation.value, command.operand, previous, value)
            self.emitter.event(
                "counter_updated",
                {"operation": command.operation.value, "previous": previous, "value": value},
            )
        if self.echo is not None:
            self.echo(value)
        return value

    def query(self) -> int:
        return self.execute(Command(Operation.QUERY))

    def get(self) -> int:
        return self.execute(Command(Operation.GET))

    def increment(self, n: int | str = 1) -> int:
        return self.execute(Command(Operation.INCREMENT, _operand(n)))

    def decrement(self, n: int | str = 1) -> int:
        return self.execute(Command(Operation.DECREMENT, _operand(n)))

    def set(self, n: int | str | None = None) -> int:
        if n is None:
            raise MissingArgumentError("set")
        return self.execute(Command(Operation.SET, _operand(n)))

    def reset(self) -> int:
        return self.execute(Command(Operation.RESET))

    @staticmethod
    def _apply(command: Command, current: int) -> int:
        operand = command.operand
        match command.operation:
            case Operation.QUERY | Operation.GET:
                return current
            case Operation.RESET:
                return 0
            case Operation.SET:
                if operand is None:
                    raise MissingArgumentError("set")
                return _checked(operand, operand)
            case Operation.INCREMENT:
                return _checked(current + _default(operand), operand)
            case Operation.DECREMENT:
                return _checked(current - _default(operand), operand)
        raise AssertionError(f"unhandled operation {command.operation!r}")


def _default(operand: int | None) -> int:
    return 1 if operand is None else operand


def _operand(n: int | str) -> int:
    if isinstance(n, str):
        return parse_integer(n)
    if type(n) is not int:
        raise InvalidArgumentError(str(n))
    if not COUNTER_MIN <= n <= COUNTER_MAX:
        raise InvalidArgumentError(str(n), "numeric argument out of range")
    return n


def _checked(value: int, operand: object) -> int:
    if not COUNTER_MIN <= value <= COUNTER_MAX:
        raise CounterOverflowError(str(operand), "result out of range")
    return value
