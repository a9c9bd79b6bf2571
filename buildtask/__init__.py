"""Build status reporting and artifact publishing for CI agents.

Public API:
    BuildSession.create(writer=None, settings=None) -> BuildSession
    TaskState, Severity
"""

from buildtask.session import BuildSession
from buildtask.status.types import Severity, TaskState

__all__ = ["BuildSession", "Severity", "TaskState"]
