"""Counter core: parsing, state, sessions and diagnostics."""

from __future__ import annotations

from .commands import COUNTER_MAX, COUNTER_MIN, Command, Operation, parse_command, parse_integer
from .config import TallyConfig, load_config
from .counter import Counter, CounterService
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    ConfigError,
    CounterError,
    CounterOverflowError,
    InvalidArgumentError,
    MissingArgumentError,
    UnknownOperationError,
)
from .session import Session


__all__ = [
    "COUNTER_MAX",
    "COUNTER_MIN",
    "Command",
    "ConfigError",
    "Counter",
    "CounterError",
    "CounterOverflowError",
    "CounterService",
    "DiagnosticEmitter",
    "InvalidArgumentError",
    "LoggingEmitter",
    "MissingArgumentError",
    "NullEmitter",
    "Operation",
    "Session",
    "TallyConfig",
    "UnknownOperationError",
    "load_config",
    "parse_command",
    "parse_integer",
]
