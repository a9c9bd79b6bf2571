"""Job status aggregation.

The aggregated state only ever moves towards FAILED. A warning lifts
SUCCEEDED to SUCCEEDED_WITH_ISSUES; an error always lands on FAILED.
FAILED is absorbing until reset().
"""

import logging

from buildtask.status.types import Severity, TaskState

logger = logging.getLogger(__name__)

ESCALATIONS: dict[TaskState, dict[Severity, TaskState]] = {
    TaskState.SUCCEEDED: {
        Severity.WARNING: TaskState.SUCCEEDED_WITH_ISSUES,
        Severity.ERROR: TaskState.FAILED,
    },
    TaskState.SUCCEEDED_WITH_ISSUES: {
        Severity.WARNING: TaskState.SUCCEEDED_WITH_ISSUES,
        Severity.ERROR: TaskState.FAILED,
    },
    TaskState.FAILED: {
        Severity.WARNING: TaskState.FAILED,
        Severity.ERROR: TaskState.FAILED,
    },
}


def escalate(current: TaskState, severity: Severity | str) -> TaskState:
    """Return the state reached from `current` after one message."""
    return ESCALATIONS[current][Severity.coerce(severity)]


class StatusAggregator:
    """Holds the current job state for one reporting session."""

    def __init__(self) -> None:
        self._state = TaskState.SUCCEEDED

    @property
    def state(self) -> TaskState:
        return self._state

    def get_state(self) -> TaskState:
        return self._state

    def record(self, severity: Severity | str) -> TaskState:
        """Apply one message of the given severity and return the new state."""
        target = escalate(self._state, severity)
        if target is not self._state:
            logger.debug("Job state %s -> %s", self._state.value, target.value)
            self._state = target
        return self._state

    def reset(self) -> None:
        if self._state is not TaskState.SUCCEEDED:
            logger.debug("Job state reset from %s", self._state.value)
        self._state = TaskState.SUCCEEDED
