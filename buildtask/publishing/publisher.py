"""Artifact publisher — hands build outputs to the host exactly once.

The publish flow for each file under the source path:
1. Skip it if its resolved path was already published this session
2. Expand .zip archives into <staging root>/<bucket>/<archive name>/
3. Emit one artifact.upload command and record the path as published

A failed expansion is reported as an error and the batch moves on. The
file is not recorded as published, so a later publish() retries it.
Failing to create the bucket directory aborts the call.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from buildtask.errors.formatter import ErrorFormatter
from buildtask.hostlog.channel import HostLog
from buildtask.publishing.archive import expand_archive, is_archive
from buildtask.publishing.types import PublishResult
from buildtask.staging.resolver import StagingDirectoryResolver

logger = logging.getLogger(__name__)

DEFAULT_BUCKET = "release"


class ArtifactPublisher:
    def __init__(
        self,
        resolver: StagingDirectoryResolver,
        host_log: HostLog,
        formatter: ErrorFormatter,
        published: Optional[set[Path]] = None,
    ) -> None:
        self.resolver = resolver
        self.host_log = host_log
        self.formatter = formatter
        # Shared with the owning session; only ever grows.
        self.published: set[Path] = published if published is not None else set()

    def publish(self, source_path: str | Path, bucket: str = DEFAULT_BUCKET) -> PublishResult:
        """Publish every file under `source_path` into `bucket`.

        Raises:
            OSError: if the staging root or bucket directory cannot be created.
        """
        bucket_dir = self.resolver.resolve() / bucket
        bucket_dir.mkdir(parents=True, exist_ok=True)

        result = PublishResult(bucket_dir=bucket_dir)
        for file_path in iter_files(Path(source_path)):
            identity = file_path.resolve()
            if identity in self.published:
                logger.debug("Already published, skipping: %s", identity)
                result.skipped.append(identity)
                continue

            if is_archive(file_path):
                target = bucket_dir / file_path.name
                if target in result.expanded:
                    self.host_log.warning(
                        f"Archive {file_path} expands into {target}, which another "
                        "archive in this publish already filled; files may be overwritten"
                    )
                try:
                    expand_archive(identity, target)
                except Exception as exc:
                    logger.error("Failed to expand %s: %s", identity, exc)
                    self.formatter.format(exc)
                    result.failed.append(identity)
                    continue
                result.expanded.append(target)

            self.host_log.upload(file_path.name, str(identity))
            self.published.add(identity)
            result.uploaded.append(identity)

        logger.info(
            "Published %d file(s) to %s (%d skipped, %d failed)",
            len(result.uploaded),
            bucket_dir,
            len(result.skipped),
            len(result.failed),
        )
        return result


def iter_files(source: Path) -> Iterator[Path]:
    """Yield `source` itself if it is a file, else every file beneath it."""
    if source.is_file():
        yield source
        return
    if not source.is_dir():
        logger.warning("Nothing to publish: %s does not exist", source)
        return
    for path in sorted(source.rglob("*")):
        if path.is_file():
            yield path
