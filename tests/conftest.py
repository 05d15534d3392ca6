from collections.abc import Iterator
import logging

import pytest

import tally.ui.cli.state as cli_state


@pytest.fixture(autouse=True)
def _reset_tally_logging() -> Iterator[None]:
    logger = logging.getLogger("tally")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture(autouse=True)
def _fresh_cli_state() -> Iterator[None]:
    token = cli_state._STATE_VAR.set(None)
    yield
    cli_state._STATE_VAR.reset(token)
