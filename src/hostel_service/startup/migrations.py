"""
Startup Migrations
==================

Decides whether to migrate the database at startup and, if so, applies the
migrations with bounded retries and exponential backoff.

Lifecycle of one run:

    Deciding -> Skipped
    Deciding -> Running -> Succeeded
    Deciding -> Running -> Failed

The policy is resolved once from configuration into a
:class:`MigrationPolicy`. ``APPLY_MIGRATIONS`` set to ``true`` / ``false``
wins; when it is missing or unreadable, migrations run only in Development.

The orchestrator never terminates the process. It returns a
:class:`MigrationResult` and the entry point decides what a failure means.

Usage:
    policy = MigrationPolicy.from_settings(settings)
    result = MigrationOrchestrator(database.migrate).run(policy)
    if result.failed:
        raise SystemExit(1)
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from hostel_service.config import Settings
from hostel_service.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

MAX_ATTEMPTS = 6
BACKOFF_CAP_SECONDS = 30


class MigrationOutcome(str, Enum):
    """Terminal states of a startup migration run."""
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class MigrationResult:
    """What happened during a run."""
    outcome: MigrationOutcome
    attempts: int = 0
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.outcome is MigrationOutcome.FAILED

    @property
    def succeeded(self) -> bool:
        return self.outcome is MigrationOutcome.SUCCEEDED

    @property
    def skipped(self) -> bool:
        return self.outcome is MigrationOutcome.SKIPPED


def parse_override(raw: Optional[str]) -> Optional[bool]:
    """
    Read the APPLY_MIGRATIONS flag.

    Returns True or False for ``"true"`` / ``"false"`` (any case, surrounding
    whitespace ignored) and None for anything else, including a missing value.
    """
    if raw is None:
        return None
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


@dataclass(frozen=True)
class MigrationPolicy:
    """Inputs of the run-or-skip decision."""
    override: Optional[bool]
    environment_is_development: bool

    @property
    def should_run(self) -> bool:
        if self.override is not None:
            return self.override
        return self.environment_is_development

    @classmethod
    def from_settings(cls, settings: Settings) -> "MigrationPolicy":
        return cls(
            override=parse_override(settings.apply_migrations),
            environment_is_development=settings.is_development,
        )


def backoff_delay(attempt: int, cap: int = BACKOFF_CAP_SECONDS) -> int:
    """Seconds to wait after failed attempt number ``attempt`` (1-based)."""
    return min(cap, 2 ** attempt)


class MigrationOrchestrator:
    """
    Runs a migration callable with bounded retries.

    Args:
        migrate: Applies pending migrations; raises on failure
        max_attempts: Total number of calls before giving up
        backoff_cap: Upper bound for a single delay, in seconds
        sleep: Blocking wait function, ``time.sleep`` by default
    """

    def __init__(
        self,
        migrate: Callable[[], None],
        *,
        max_attempts: int = MAX_ATTEMPTS,
        backoff_cap: int = BACKOFF_CAP_SECONDS,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._migrate = migrate
        self._max_attempts = max_attempts
        self._backoff_cap = backoff_cap
        self._sleep = sleep or time.sleep
        self._result: Optional[MigrationResult] = None

    @property
    def result(self) -> Optional[MigrationResult]:
        """Result of the run, None until :meth:`run` has returned."""
        return self._result

    def run(self, policy: MigrationPolicy) -> MigrationResult:
        """
        Decide and, if required, migrate. May only be called once.

        Raises:
            RuntimeError: If called a second time
        """
        if self._result is not None:
            raise RuntimeError("Startup migrations have already been evaluated for this process")

        if not policy.should_run:
            logger.info(
                "Skipping automatic migrations",
                extra={
                    "apply_migrations": policy.override,
                    "environment_is_development": policy.environment_is_development,
                }
            )
            self._result = MigrationResult(MigrationOutcome.SKIPPED)
        else:
            self._result = self._run_with_retry()
        return self._result

    def _run_with_retry(self) -> MigrationResult:
        attempt = 0
        while True:
            attempt += 1
            logger.info(
                f"Attempting database migration (attempt {attempt}/{self._max_attempts})",
                extra={"attempt": attempt, "max_attempts": self._max_attempts}
            )
            try:
                self._migrate()
            except Exception as e:
                logger.warning(
                    f"Database migration attempt {attempt} failed: {e}",
                    exc_info=True,
                    extra={"attempt": attempt, "max_attempts": self._max_attempts, "error": str(e)}
                )
                if attempt >= self._max_attempts:
                    logger.error(
                        f"Failed to apply migrations after {attempt} attempts. Aborting startup.",
                        extra={"attempts": attempt, "error": str(e)}
                    )
                    return MigrationResult(MigrationOutcome.FAILED, attempts=attempt, error=e)

                delay = backoff_delay(attempt, self._backoff_cap)
                logger.info(
                    f"Waiting {delay}s before next migration attempt",
                    extra={"attempt": attempt, "delay_seconds": delay}
                )
                self._sleep(delay)
                continue

            logger.info("Database migrations applied successfully", extra={"attempts": attempt})
            return MigrationResult(MigrationOutcome.SUCCEEDED, attempts=attempt)
