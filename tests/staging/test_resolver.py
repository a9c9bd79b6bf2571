"""Tests for staging root resolution and caching."""

import logging

import pytest

from buildtask.core.config import Settings
from buildtask.staging.resolver import TEMP_DIR_PREFIX, StagingDirectoryResolver, dump_environment


class TestResolvePrimary:
    def test_uses_host_staging_directory(self, monkeypatch, tmp_path):
        target = tmp_path / "a" / "staging"
        monkeypatch.setenv("BUILD_STAGINGDIRECTORY", str(target))
        root = StagingDirectoryResolver().resolve()
        assert root == target
        assert target.is_dir()

    def test_existing_directory_is_reused(self, monkeypatch, tmp_path):
        target = tmp_path / "staging"
        target.mkdir()
        (target / "keep.txt").write_text("x")
        monkeypatch.setenv("BUILD_STAGINGDIRECTORY", str(target))
        assert StagingDirectoryResolver().resolve() == target
        assert (target / "keep.txt").exists()

    def test_blank_value_counts_as_unset(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BUILD_STAGINGDIRECTORY", "   ")
        monkeypatch.setenv("AGENT_TEMPDIRECTORY", str(tmp_path))
        root = StagingDirectoryResolver().resolve()
        assert root.parent == tmp_path
        assert root.name.startswith(TEMP_DIR_PREFIX)

    def test_creation_failure_propagates(self, monkeypatch, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        monkeypatch.setenv("BUILD_STAGINGDIRECTORY", str(blocker / "staging"))
        with pytest.raises(OSError):
            StagingDirectoryResolver().resolve()


class TestResolveFallback:
    def test_creates_new_directory_under_agent_temp(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AGENT_TEMPDIRECTORY", str(tmp_path))
        before = set(tmp_path.iterdir())
        root = StagingDirectoryResolver().resolve()
        assert root not in before
        assert root.is_dir()
        assert root.parent == tmp_path

    def test_uses_system_temp_without_agent_temp(self):
        root = StagingDirectoryResolver().resolve()
        try:
            assert root.is_dir()
            assert root.name.startswith(TEMP_DIR_PREFIX)
        finally:
            root.rmdir()

    def test_logs_environment_in_the_warning(self, monkeypatch, tmp_path, caplog):
        monkeypatch.setenv("AGENT_TEMPDIRECTORY", str(tmp_path))
        monkeypatch.setenv("BUILDTASK_TEST_MARKER", "present")
        with caplog.at_level(logging.WARNING, logger="buildtask.staging.resolver"):
            StagingDirectoryResolver().resolve()
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert "BUILD_STAGINGDIRECTORY is not set" in record.getMessage()
        assert "BUILDTASK_TEST_MARKER=present" in record.getMessage()

    def test_configured_directory_does_not_dump_environment(self, monkeypatch, tmp_path, caplog):
        monkeypatch.setenv("BUILD_STAGINGDIRECTORY", str(tmp_path / "staging"))
        monkeypatch.setenv("BUILDTASK_TEST_MARKER", "present")
        with caplog.at_level(logging.DEBUG, logger="buildtask.staging.resolver"):
            StagingDirectoryResolver().resolve()
        assert "BUILDTASK_TEST_MARKER" not in caplog.text


class TestCaching:
    def test_same_path_every_call(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AGENT_TEMPDIRECTORY", str(tmp_path))
        resolver = StagingDirectoryResolver()
        paths = [resolver.resolve() for _ in range(5)]
        assert all(p == paths[0] for p in paths)
        assert len(list(tmp_path.iterdir())) == 1

    def test_later_environment_changes_are_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AGENT_TEMPDIRECTORY", str(tmp_path))
        resolver = StagingDirectoryResolver()
        first = resolver.resolve()
        monkeypatch.setenv("BUILD_STAGINGDIRECTORY", str(tmp_path / "late"))
        assert resolver.resolve() == first
        assert not (tmp_path / "late").exists()

    def test_settings_read_once(self, tmp_path):
        calls = []

        def factory():
            calls.append(1)
            return Settings(build_stagingdirectory=str(tmp_path / "s"))

        resolver = StagingDirectoryResolver(factory)
        assert not resolver.is_resolved
        resolver.resolve()
        resolver.resolve()
        assert resolver.is_resolved
        assert len(calls) == 1


def test_dump_environment_is_sorted():
    assert dump_environment({"B": "2", "A": "1"}) == "A=1\nB=2"
