"""CI host logging boundary.

Public API:
    HostLog(writer, aggregator, container_folder)
    StreamWriter(stream=None), RecordingWriter()
"""

from buildtask.hostlog.channel import HostLog
from buildtask.hostlog.writer import HostLogWriter, RecordingWriter, StreamWriter

__all__ = ["HostLog", "HostLogWriter", "RecordingWriter", "StreamWriter"]
