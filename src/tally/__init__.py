"""Primary public API for tally."""

from __future__ import annotations

from tally.core import (
    COUNTER_MAX,
    COUNTER_MIN,
    Command,
    ConfigError,
    Counter,
    CounterError,
    CounterOverflowError,
    CounterService,
    InvalidArgumentError,
    MissingArgumentError,
    Operation,
    Session,
    TallyConfig,
    UnknownOperationError,
    load_config,
    parse_command,
    parse_integer,
)
from tally.version import get_version


__version__ = get_version()

__all__ = [
    "COUNTER_MAX",
    "COUNTER_MIN",
    "Command",
    "ConfigError",
    "Counter",
    "CounterError",
    "CounterOverflowError",
    "CounterService",
    "InvalidArgumentError",
    "MissingArgumentError",
    "Operation",
    "Session",
    "TallyConfig",
    "UnknownOperationError",
    "__version__",
    "get_version",
    "load_config",
    "parse_command",
    "parse_integer",
]
