"""Types for the publishing module."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class PublishResult:
    """Outcome of one publish() call.

    uploaded: files that produced an artifact.upload command in this call.
    skipped:  files already published earlier in the session.
    failed:   files whose expansion failed; they stay unpublished.
    expanded: directories that archives were expanded into.
    """

    bucket_dir: Path
    uploaded: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)
    expanded: list[Path] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "bucket_dir": str(self.bucket_dir),
            "uploaded": [str(p) for p in self.uploaded],
            "skipped": [str(p) for p in self.skipped],
            "failed": [str(p) for p in self.failed],
            "expanded": [str(p) for p in self.expanded],
            "is_success": self.is_success,
        }
