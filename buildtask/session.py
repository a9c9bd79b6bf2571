"""Build session — owns all state for one job.

A session is created when the job starts and discarded when it ends.
It wires the components together and holds the only mutable state:
the aggregated status, the set of published files and the cached
staging root.

    session = BuildSession.create()
    session.publish("out/")
    session.report_error(exc)
    session.complete()
"""

import logging
from pathlib import Path
from typing import Any, Optional

from buildtask.core.config import Settings, get_settings
from buildtask.errors.formatter import ErrorFormatter
from buildtask.hostlog.channel import HostLog
from buildtask.hostlog.writer import HostLogWriter, StreamWriter
from buildtask.publishing.publisher import ArtifactPublisher
from buildtask.publishing.types import PublishResult
from buildtask.staging.resolver import StagingDirectoryResolver
from buildtask.status.aggregator import StatusAggregator
from buildtask.status.types import TaskState

logger = logging.getLogger(__name__)


class BuildSession:
    def __init__(
        self,
        settings: Settings,
        writer: HostLogWriter,
        resolver: Optional[StagingDirectoryResolver] = None,
    ) -> None:
        self.settings = settings
        self.aggregator = StatusAggregator()
        self.published: set[Path] = set()
        self.resolver = resolver or StagingDirectoryResolver(lambda: settings)
        self.host_log = HostLog(writer, self.aggregator, settings.artifact_container)
        self.formatter = ErrorFormatter(self.host_log)
        self.publisher = ArtifactPublisher(
            self.resolver, self.host_log, self.formatter, self.published
        )
        self._completed = False

    @classmethod
    def create(
        cls,
        writer: Optional[HostLogWriter] = None,
        settings: Optional[Settings] = None,
    ) -> "BuildSession":
        """Build a session from the environment, writing to stdout by default."""
        return cls(settings or get_settings(), writer or StreamWriter())

    @property
    def state(self) -> TaskState:
        return self.aggregator.state

    def publish(self, source_path: str | Path, bucket: Optional[str] = None) -> PublishResult:
        return self.publisher.publish(source_path, bucket or self.settings.default_bucket)

    def report_error(self, error: Any) -> list[str]:
        return self.formatter.format(error)

    def report_warning(self, text: str) -> TaskState:
        return self.host_log.warning(text)

    def info(self, text: str) -> None:
        self.host_log.info(text)

    def reset(self) -> None:
        """Start a new reporting phase.

        Status goes back to SUCCEEDED and completion may be emitted again.
        Published files stay published.
        """
        self.aggregator.reset()
        self._completed = False

    def complete(self) -> TaskState:
        """Emit task.complete with the final state, once per reporting phase."""
        state = self.aggregator.state
        if self._completed:
            logger.debug("Completion already emitted; ignoring repeat call")
            return state
        self.host_log.complete(state)
        self._completed = True
        logger.info("Job completed with result %s", state.value)
        return state
