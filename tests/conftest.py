"""Shared fixtures for the buildtask test suite.

Host variables are cleared for every test so a real agent environment
never leaks into results. Tests opt in with monkeypatch.setenv.
"""

import pytest

from buildtask.core.config import Settings
from buildtask.hostlog.writer import RecordingWriter
from buildtask.session import BuildSession


@pytest.fixture(autouse=True)
def _clean_host_env(monkeypatch, tmp_path):
    monkeypatch.delenv("AGENT_TEMPDIRECTORY", raising=False)
    monkeypatch.delenv("BUILD_STAGINGDIRECTORY", raising=False)
    monkeypatch.delenv("ARTIFACT_CONTAINER", raising=False)
    monkeypatch.delenv("DEFAULT_BUCKET", raising=False)
    # Keep a stray .env in the working directory from being read.
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def staging_dir(tmp_path):
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def session(staging_dir, writer) -> BuildSession:
    settings = Settings(build_stagingdirectory=str(staging_dir))
    return BuildSession(settings, writer)
