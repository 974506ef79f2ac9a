from __future__ import annotations

import logging

import pytest

from jirafield.common.logging import BUILD_LOGGER_NAME
from jirafield.domain.run import BuildRun
from tests.support.issues import FakeSite, RecordingSession


@pytest.fixture(autouse=True)
def _clear_jira_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JIRA_URL", "JIRA_USER", "JIRA_API_TOKEN", "JIRA_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def build_log(caplog: pytest.LogCaptureFixture) -> logging.Logger:
    caplog.set_level(logging.DEBUG, logger=BUILD_LOGGER_NAME)
    return logging.getLogger(BUILD_LOGGER_NAME)


@pytest.fixture
def build_run(build_log: logging.Logger) -> BuildRun:
    return BuildRun(environment={"BUILD_NUMBER": "42", "GIT_BRANCH": "main"}, log=build_log)


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()


@pytest.fixture
def site(session: RecordingSession) -> FakeSite:
    return FakeSite(session=session)
