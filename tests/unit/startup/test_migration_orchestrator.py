"""Unit tests for the startup migration retry loop.

Covers:
- Skip path issues no migration call and logs once at INFO
- Retry with exponential backoff capped at 30 seconds
- Abort after six failed attempts without a seventh call or extra delay
- A run can only happen once per orchestrator
"""

import logging
from unittest.mock import MagicMock

import pytest

from hostel_service.startup.migrations import (
    BACKOFF_CAP_SECONDS,
    MAX_ATTEMPTS,
    MigrationOrchestrator,
    MigrationOutcome,
    MigrationPolicy,
    backoff_delay,
)

LOGGER_NAME = "hostel_service.startup.migrations"

RUN = MigrationPolicy(override=True, environment_is_development=False)
SKIP = MigrationPolicy(override=None, environment_is_development=False)


class FakeSleep:
    """Records requested delays instead of blocking."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.delays)


@pytest.fixture
def sleep() -> FakeSleep:
    return FakeSleep()


def _records(caplog: pytest.LogCaptureFixture, level: int) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == LOGGER_NAME and r.levelno == level]


class TestBackoffDelay:
    """Tests for the delay formula."""

    def test_constants(self) -> None:
        assert MAX_ATTEMPTS == 6
        assert BACKOFF_CAP_SECONDS == 30

    @pytest.mark.parametrize(
        "attempt,expected",
        [(1, 2), (2, 4), (3, 8), (4, 16), (5, 30), (6, 30), (10, 30)],
    )
    def test_exponential_with_cap(self, attempt: int, expected: int) -> None:
        assert backoff_delay(attempt) == expected


class TestSkipped:
    """Tests for the policy skip path."""

    def test_no_migration_call(self, sleep: FakeSleep) -> None:
        migrate = MagicMock()
        result = MigrationOrchestrator(migrate, sleep=sleep).run(SKIP)

        assert result.outcome is MigrationOutcome.SKIPPED
        assert result.skipped
        assert result.attempts == 0
        migrate.assert_not_called()
        assert sleep.delays == []

    def test_logs_exactly_one_info_line(self, caplog: pytest.LogCaptureFixture, sleep: FakeSleep) -> None:
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

        MigrationOrchestrator(MagicMock(), sleep=sleep).run(SKIP)

        records = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert "Skipping" in records[0].getMessage()

    def test_explicit_false_skips_in_development(self, sleep: FakeSleep) -> None:
        migrate = MagicMock()
        policy = MigrationPolicy(override=False, environment_is_development=True)

        result = MigrationOrchestrator(migrate, sleep=sleep).run(policy)

        assert result.outcome is MigrationOutcome.SKIPPED
        migrate.assert_not_called()


class TestRunning:
    """Tests for the retry loop."""

    def test_first_attempt_succeeds(self, sleep: FakeSleep) -> None:
        migrate = MagicMock()
        result = MigrationOrchestrator(migrate, sleep=sleep).run(RUN)

        assert result.outcome is MigrationOutcome.SUCCEEDED
        assert result.attempts == 1
        assert result.error is None
        migrate.assert_called_once_with()
        assert sleep.delays == []

    def test_succeeds_on_fourth_attempt(self, caplog: pytest.LogCaptureFixture, sleep: FakeSleep) -> None:
        """Three failures then success: three warnings, one success line, 14s of delay."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        migrate = MagicMock(side_effect=[ConnectionError("db down")] * 3 + [None])

        result = MigrationOrchestrator(migrate, sleep=sleep).run(RUN)

        assert result.outcome is MigrationOutcome.SUCCEEDED
        assert result.attempts == 4
        assert migrate.call_count == 4
        assert sleep.delays == [2, 4, 8]
        assert sleep.total == 14

        warnings = _records(caplog, logging.WARNING)
        assert len(warnings) == 3
        assert [r.attempt for r in warnings] == [1, 2, 3]
        assert all("db down" in r.getMessage() for r in warnings)

        successes = [r for r in _records(caplog, logging.INFO) if "applied successfully" in r.getMessage()]
        assert len(successes) == 1
        assert _records(caplog, logging.ERROR) == []

    def test_all_attempts_fail(self, caplog: pytest.LogCaptureFixture, sleep: FakeSleep) -> None:
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        error = TimeoutError("lock timeout")
        migrate = MagicMock(side_effect=error)

        result = MigrationOrchestrator(migrate, sleep=sleep).run(RUN)

        assert result.outcome is MigrationOutcome.FAILED
        assert result.failed
        assert result.attempts == 6
        assert result.error is error
        assert migrate.call_count == 6
        # No delay after the sixth failure
        assert sleep.delays == [2, 4, 8, 16, 30]

        assert len(_records(caplog, logging.WARNING)) == 6
        errors = _records(caplog, logging.ERROR)
        assert len(errors) == 1
        assert "after 6 attempts" in errors[0].getMessage()

    def test_custom_attempt_limit(self, sleep: FakeSleep) -> None:
        migrate = MagicMock(side_effect=RuntimeError("boom"))

        result = MigrationOrchestrator(migrate, max_attempts=2, sleep=sleep).run(RUN)

        assert result.attempts == 2
        assert sleep.delays == [2]

    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValueError):
            MigrationOrchestrator(MagicMock(), max_attempts=0)


class TestSingleRun:
    """Migrations are evaluated at most once per orchestrator."""

    def test_second_run_raises(self, sleep: FakeSleep) -> None:
        migrate = MagicMock()
        orchestrator = MigrationOrchestrator(migrate, sleep=sleep)
        first = orchestrator.run(RUN)

        with pytest.raises(RuntimeError):
            orchestrator.run(RUN)

        assert orchestrator.result is first
        migrate.assert_called_once()

    def test_result_is_none_before_run(self) -> None:
        assert MigrationOrchestrator(MagicMock()).result is None
