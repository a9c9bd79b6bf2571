"""Error kinds and formatting.

Public API:
    ErrorFormatter(host_log).format(obj) -> list[str]
    classify(obj) -> ErrorRecord
    render(record) -> str
"""

from buildtask.errors.formatter import ErrorFormatter, classify, render
from buildtask.errors.types import (
    ArchiveExpansionError,
    BuildTaskError,
    ErrorRecord,
    ParseErrorRecord,
    RemoteError,
    RemoteErrorRecord,
    RuntimeErrorRecord,
    UnrecognizedError,
)

__all__ = [
    "ErrorFormatter",
    "classify",
    "render",
    "ArchiveExpansionError",
    "BuildTaskError",
    "ErrorRecord",
    "ParseErrorRecord",
    "RemoteError",
    "RemoteErrorRecord",
    "RuntimeErrorRecord",
    "UnrecognizedError",
]
