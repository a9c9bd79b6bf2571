"""Job status aggregation."""

from buildtask.status.aggregator import StatusAggregator
from buildtask.status.types import Message, Severity, TaskState

__all__ = ["StatusAggregator", "Message", "Severity", "TaskState"]
