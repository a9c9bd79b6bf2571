"""Writers that deliver host log lines.

Each implementation handles its own destination. Callers interact only
with the HostLogWriter protocol, so the publishing pipeline can be
exercised against RecordingWriter without capturing stdout.
"""

import sys
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class HostLogWriter(Protocol):
    """Protocol for host log line sinks."""

    def write_line(self, line: str) -> None:
        """Deliver one complete line (without trailing newline)."""
        ...  # noqa: PLR6301


class StreamWriter:
    """Writes lines to a text stream, stdout unless told otherwise."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        # Looked up per call so a redirected sys.stdout is honoured.
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()


class RecordingWriter:
    """Keeps every written line in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def commands(self, kind: str) -> list[str]:
        """Return the recorded lines for one command kind, e.g. "artifact.upload"."""
        prefix = f"##vso[{kind}"
        return [
            line for line in self.lines
            if line.startswith(prefix) and line[len(prefix):len(prefix) + 1] in (" ", "]")
        ]
