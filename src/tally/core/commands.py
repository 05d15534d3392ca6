"""Parsing of textual counter commands into typed values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
import logging
import re

from .exceptions import InvalidArgumentError, MissingArgumentError, UnknownOperationError


logger = logging.getLogger(__name__)

__all__ = [
    "COUNTER_MAX",
    "COUNTER_MIN",
    "KEYWORDS",
    "Command",
    "Operation",
    "parse_command",
    "parse_integer",
]

# Signed 64-bit range of the host's native long.
COUNTER_MIN = -(2**63)
COUNTER_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Operation(Enum):
    """Closed set of operations understood by the counter."""

    QUERY = "query"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    SET = "set"
    RESET = "reset"
    GET = "get"


KEYWORDS: dict[str, Operation] = {
    "inc": Operation.INCREMENT,
    "increment": Operation.INCREMENT,
    "dec": Operation.DECREMENT,
    "decrement": Operation.DECREMENT,
    "set": Operation.SET,
    "reset": Operation.RESET,
    "get": Operation.GET,
}

_TAKES_OPERAND = {Operation.INCREMENT, Operation.DECREMENT, Operation.SET}


@dataclass(frozen=True, slots=True)
class Command:
    """A validated counter command ready for execution."""

    operation: Operation
    operand: int | None = None
    literal: bool = False


def parse_integer(text: str) -> int:
    """Parse ``text`` as a whole base-10 integer within the counter range.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace, underscores and trailing characters are rejected.
    """
    if not isinstance(text, str) or _INTEGER_RE.fullmatch(text) is None:
        raise InvalidArgumentError(str(text))
    value = int(text)
    if not COUNTER_MIN <= value <= COUNTER_MAX:
        raise InvalidArgumentError(text, "numeric argument out of range")
    return value


def parse_command(tokens: Sequence[str]) -> Command:
    """Turn command tokens into a :class:`Command`.

    An empty token sequence is the bare query. A first token that is not a
    keyword is accepted as a literal ``set`` when it parses as an integer.
    """
    if not tokens:
        return Command(Operation.QUERY)

    head, *rest = tokens
    operation = KEYWORDS.get(head)

    if operation is None:
        try:
            value = parse_integer(head)
        except InvalidArgumentError as exc:
            raise UnknownOperationError(head) from exc
        _log_ignored(head, rest)
        return Command(Operation.SET, value, literal=True)

    if operation not in _TAKES_OPERAND:
        _log_ignored(head, rest)
        return Command(operation)

    if not rest:
        if operation is Operation.SET:
            raise MissingArgumentError(head)
        return Command(operation, 1)

    operand, *extra = rest
    _log_ignored(head, extra)
    return Command(operation, parse_integer(operand))


def _log_ignored(head: str, extra: Sequence[str]) -> None:
    if extra:
        logger.debug("%s: ignoring extra arguments %s", head, list(extra))
