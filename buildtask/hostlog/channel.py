"""The host log channel for one session.

Pairs the command renderers with a writer and routes every reported
issue into the StatusAggregator, so logging an error is also what fails
the job.
"""

import logging

from buildtask.hostlog import commands
from buildtask.hostlog.writer import HostLogWriter
from buildtask.status.aggregator import StatusAggregator
from buildtask.status.types import Message, Severity, TaskState

logger = logging.getLogger(__name__)


class HostLog:
    def __init__(
        self,
        writer: HostLogWriter,
        aggregator: StatusAggregator,
        container_folder: str,
    ) -> None:
        self.writer = writer
        self.aggregator = aggregator
        self.container_folder = container_folder

    def info(self, text: str) -> None:
        """Write plain, untagged lines."""
        for line in text.splitlines() or [""]:
            self.writer.write_line(line)

    def report(self, message: Message) -> TaskState:
        """Write a task.logissue line and escalate the job state."""
        self.writer.write_line(commands.log_issue(message.severity, message.text))
        return self.aggregator.record(message.severity)

    def error(self, text: str) -> TaskState:
        return self.report(Message(Severity.ERROR, text))

    def warning(self, text: str) -> TaskState:
        return self.report(Message(Severity.WARNING, text))

    def upload(self, artifact_name: str, path: str) -> None:
        self.writer.write_line(
            commands.artifact_upload(self.container_folder, artifact_name, path)
        )
        logger.info("Upload requested: %s (%s)", artifact_name, path)

    def complete(self, result: TaskState) -> None:
        self.writer.write_line(commands.task_complete(result))
