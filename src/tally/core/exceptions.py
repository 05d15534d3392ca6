"""Exception hierarchy for counter commands and their host session."""

from __future__ import annotations


__all__ = [
    "ConfigError",
    "CounterError",
    "CounterOverflowError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "UnknownOperationError",
    "exception_messages",
]


class CounterError(ValueError):
    """Base exception for rejected counter commands."""


class MissingArgumentError(CounterError):
    """Raised when a command requires a numeric operand and none was given."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}: numeric argument required")
        self.operation = operation


class InvalidArgumentError(CounterError):
    """Raised when an operand fails strict integer parsing."""

    def __init__(self, argument: str, reason: str = "numeric argument required") -> None:
        super().__init__(f"{argument}: {reason}")
        self.argument = argument


class CounterOverflowError(InvalidArgumentError):
    """Raised when applying an operand would leave the counter range."""


class UnknownOperationError(CounterError):
    """Raised when the first token is neither a keyword nor an integer."""

    def __init__(self, token: str) -> None:
        super().__init__(f"{token}: invalid operation (use: inc, dec, set, reset, or get)")
        self.token = token


class ConfigError(CounterError):
    """Raised when a configuration file cannot be loaded or validated."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages
