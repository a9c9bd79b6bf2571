"""Types for job status reporting.

TaskState is the aggregated job result reported to the CI host.
Severity and Message describe a single reported issue.
"""

from dataclasses import dataclass
from enum import StrEnum


class TaskState(StrEnum):
    """Aggregated job result, ordered by severity.

    The value is the name the CI host expects in `task.complete`.
    """

    SUCCEEDED = "Succeeded"
    SUCCEEDED_WITH_ISSUES = "SucceededWithIssues"
    FAILED = "Failed"

    @property
    def rank(self) -> int:
        return _RANK[self]


_RANK: dict[TaskState, int] = {
    TaskState.SUCCEEDED: 0,
    TaskState.SUCCEEDED_WITH_ISSUES: 1,
    TaskState.FAILED: 2,
}


class Severity(StrEnum):
    """Severity of a reported issue."""

    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def coerce(cls, value: str) -> "Severity":
        """Map any non-error value onto WARNING."""
        if str(value).strip().lower() == cls.ERROR.value:
            return cls.ERROR
        return cls.WARNING


@dataclass(frozen=True)
class Message:
    severity: Severity
    text: str
