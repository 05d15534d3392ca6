import pytest

from tally.core.config import TallyConfig
from tally.core.counter import Counter, CounterService
from tally.core.exceptions import InvalidArgumentError, MissingArgumentError, UnknownOperationError
from tally.core.session import (
    DOCUMENTATION,
    EXECUTION_FAILURE,
    EXECUTION_SUCCESS,
    Session,
    SessionExit,
    usage,
)


class RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.errors: list[tuple[str, BaseException | None]] = []
        self.events: list[str] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append((message, exc))

    def event(self, name: str, payload) -> None:
        self.events.append(name)


def _session(**config: object) -> tuple[Session, list[str], RecordingEmitter]:
    output: list[str] = []
    emitter = RecordingEmitter()
    session = Session(config=TallyConfig(**config), emitter=emitter, echo=output.append)
    return session, output, emitter


def test_counter_persists_between_lines() -> None:
    session, output, _ = _session()
    with session:
        session.run(["counter reset"] + ["counter inc"] * 10)
    assert output == [str(value) for value in range(11)]


def test_command_word_is_optional() -> None:
    session, output, _ = _session()
    with session:
        session.run(["counter inc 5", "dec 2", "counter", "get", "7"])
    assert output == ["5", "3", "3", "3", "7"]


def test_custom_command_name_is_stripped() -> None:
    session, output, emitter = _session(command_name="tick")
    with session:
        session.run(["tick inc 4", "tick"])
        status = session.execute_line("counter inc")
    assert output == ["4", "4"]
    assert status == EXECUTION_FAILURE
    assert emitter.errors[0][0] == "tick: counter: invalid operation (use: inc, dec, set, reset, or get)"


def test_failures_are_reported_and_session_continues() -> None:
    session, output, emitter = _session()
    with session:
        assert session.execute_line("counter set 8") == EXECUTION_SUCCESS
        assert session.execute_line("counter set") == EXECUTION_FAILURE
        assert session.execute_line("counter inc abc") == EXECUTION_FAILURE
        assert session.execute_line("counter frobnicate") == EXECUTION_FAILURE
        assert session.execute_line("counter") == EXECUTION_SUCCESS
    assert output == ["8", "8"]
    messages = [message for message, _ in emitter.errors]
    assert messages == [
        "counter: set: numeric argument required",
        "counter: abc: numeric argument required",
        "counter: frobnicate: invalid operation (use: inc, dec, set, reset, or get)",
    ]
    assert isinstance(emitter.errors[0][1], MissingArgumentError)
    assert isinstance(emitter.errors[1][1], InvalidArgumentError)
    assert isinstance(emitter.errors[2][1], UnknownOperationError)


def test_run_returns_status_of_last_command() -> None:
    session, _, _ = _session()
    assert session.run(["inc", "bogus"]) == EXECUTION_FAILURE
    assert session.run(["bogus", "inc"]) == EXECUTION_SUCCESS
    assert session.last_status == EXECUTION_SUCCESS


def test_blank_and_comment_lines_are_skipped() -> None:
    session, output, _ = _session()
    with session:
        status = session.run(["", "   ", "# a comment", "inc 2", "\n"])
    assert output == ["2"]
    assert status == EXECUTION_SUCCESS


def test_quoted_tokens_are_split_like_a_shell() -> None:
    session, output, emitter = _session()
    session.execute_line("counter set '12'")
    status = session.execute_line("counter inc '1 2'")
    assert output == ["12"]
    assert status == EXECUTION_FAILURE
    assert emitter.errors[0][0] == "counter: 1 2: numeric argument required"


def test_unbalanced_quotes_are_a_syntax_error() -> None:
    session, output, emitter = _session()
    assert session.execute_line("counter set '5") == EXECUTION_FAILURE
    assert output == []
    assert emitter.errors[0][0].startswith("syntax error:")


def test_exit_stops_the_session() -> None:
    session, output, _ = _session()
    status = session.run(["inc", "exit 3", "inc"])
    assert status == 3
    assert output == ["1"]


def test_exit_without_status_keeps_last_status() -> None:
    session, _, _ = _session()
    assert session.run(["bogus", "quit", "inc"]) == EXECUTION_FAILURE


def test_exit_with_malformed_status_fails() -> None:
    session, _, emitter = _session()
    with pytest.raises(SessionExit) as excinfo:
        session.execute_line("exit soon")
    assert excinfo.value.status == EXECUTION_FAILURE
    assert emitter.errors[0][0] == "exit: soon: numeric argument required"


def test_help_prints_usage_and_documentation() -> None:
    session, output, _ = _session()
    assert session.execute_line("help") == EXECUTION_SUCCESS
    assert output[0] == usage() == "counter [inc|dec|set|reset|get] [n]"
    assert tuple(output[1:]) == DOCUMENTATION


def test_lifecycle_resets_and_announces() -> None:
    output: list[str] = []
    emitter = RecordingEmitter()
    service = CounterService(Counter(99))
    session = Session(
        service,
        TallyConfig(announce_lifecycle=True),
        emitter=emitter,
        echo=output.append,
    )
    with session:
        session.execute_line("counter")
    assert output == [
        "Counter builtin loaded. Initializing counter to 0.",
        "0",
        "Counter builtin unloaded.",
    ]
    assert emitter.events == ["counter_loaded", "counter_unloaded"]


def test_lifecycle_is_silent_by_default() -> None:
    session, output, emitter = _session()
    with session:
        pass
    assert output == []
    assert emitter.events == ["counter_loaded", "counter_unloaded"]


def test_unload_without_load_is_a_noop() -> None:
    session, output, emitter = _session(announce_lifecycle=True)
    session.unload()
    assert output == []
    assert emitter.events == []


def test_supplied_service_reports_through_session_emitter() -> None:
    emitter = RecordingEmitter()
    session = Session(CounterService(), emitter=emitter)
    with session:
        session.execute_line("counter inc 2")
    assert emitter.events == ["counter_loaded", "counter_updated", "counter_unloaded"]


def test_supplied_service_keeps_its_own_emitter() -> None:
    own, hosting = RecordingEmitter(), RecordingEmitter()
    session = Session(CounterService(emitter=own), emitter=hosting)
    session.execute_line("inc")
    assert own.events == ["counter_updated"]
    assert hosting.events == []
