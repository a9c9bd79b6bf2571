"""Tests for the host log channel and writers."""

import io

import pytest

from buildtask.hostlog.channel import HostLog
from buildtask.hostlog.writer import HostLogWriter, RecordingWriter, StreamWriter
from buildtask.status.aggregator import StatusAggregator
from buildtask.status.types import TaskState


@pytest.fixture
def channel():
    return HostLog(RecordingWriter(), StatusAggregator(), "artifacts")


class TestHostLog:
    def test_error_writes_issue_and_fails_job(self, channel):
        state = channel.error("compile failed")
        assert channel.writer.lines == ["##vso[task.logissue type=error]compile failed"]
        assert state is TaskState.FAILED
        assert channel.aggregator.state is TaskState.FAILED

    def test_warning_escalates_to_with_issues(self, channel):
        channel.warning("deprecated flag")
        assert channel.writer.lines == ["##vso[task.logissue type=warning]deprecated flag"]
        assert channel.aggregator.state is TaskState.SUCCEEDED_WITH_ISSUES

    def test_info_writes_untagged_lines(self, channel):
        channel.info("first\nsecond")
        assert channel.writer.lines == ["first", "second"]
        assert channel.aggregator.state is TaskState.SUCCEEDED

    def test_upload_uses_container_folder(self, channel):
        channel.upload("a.txt", "/out/a.txt")
        assert channel.writer.commands("artifact.upload") == [
            "##vso[artifact.upload containerfolder=artifacts;artifactname=a.txt]/out/a.txt"
        ]

    def test_complete_writes_result(self, channel):
        channel.complete(TaskState.FAILED)
        assert channel.writer.lines == ["##vso[task.complete result=Failed]"]


class TestWriters:
    def test_writers_satisfy_protocol(self):
        assert isinstance(RecordingWriter(), HostLogWriter)
        assert isinstance(StreamWriter(), HostLogWriter)

    def test_stream_writer_appends_newline(self):
        buf = io.StringIO()
        StreamWriter(buf).write_line("##vso[task.complete result=Succeeded]")
        assert buf.getvalue() == "##vso[task.complete result=Succeeded]\n"

    def test_stream_writer_defaults_to_stdout(self, capsys):
        StreamWriter().write_line("hello")
        assert capsys.readouterr().out == "hello\n"

    def test_recording_writer_filters_by_kind(self):
        writer = RecordingWriter()
        writer.write_line("##vso[task.logissue type=error]x")
        writer.write_line("##vso[task.complete result=Failed]")
        writer.write_line("plain")
        assert writer.commands("task.complete") == ["##vso[task.complete result=Failed]"]
        assert writer.commands("task") == []
