"""Publishing module for build artifacts.

Public API:
    ArtifactPublisher(resolver, host_log, formatter).publish(source_path, bucket) -> PublishResult
    expand_archive(archive, dest_dir) -> list[Path]
"""

from buildtask.publishing.archive import expand_archive, is_archive
from buildtask.publishing.publisher import ArtifactPublisher
from buildtask.publishing.types import PublishResult

__all__ = ["ArtifactPublisher", "PublishResult", "expand_archive", "is_archive"]
