"""Exception hierarchy and the error kinds understood by the formatter.

ErrorRecord is a closed union: every object handed to the formatter is
classified into exactly one of the record types below, with
UnrecognizedError as the catch-all.
"""

from dataclasses import dataclass
from typing import Optional, Union


class BuildTaskError(Exception):
    """Base class for errors raised by this package."""


class RemoteError(BuildTaskError):
    """A failure reported by another process or service.

    Carries the remote side's own stack text and a description of where
    it came from (host, worker id, service name).
    """

    def __init__(self, message: str, origin: str, remote_stack: str = ""):
        self.origin = origin
        self.remote_stack = remote_stack
        super().__init__(message)


class ArchiveExpansionError(BuildTaskError):
    """Raised when an archive cannot be expanded safely."""

    def __init__(self, archive: str, reason: str):
        self.archive = archive
        self.reason = reason
        super().__init__(f"Cannot expand {archive}: {reason}")


@dataclass(frozen=True)
class RuntimeErrorRecord:
    type_name: str
    message: str
    stack: str = ""
    cause: Optional["ErrorRecord"] = None


@dataclass(frozen=True)
class ParseErrorRecord:
    type_name: str
    message: str
    location: str = ""
    source_line: str = ""
    stack: str = ""


@dataclass(frozen=True)
class RemoteErrorRecord:
    message: str
    origin: str
    stack: str = ""
    local_stack: str = ""


@dataclass(frozen=True)
class UnrecognizedError:
    type_name: str
    text: str


ErrorRecord = Union[RuntimeErrorRecord, ParseErrorRecord, RemoteErrorRecord, UnrecognizedError]
