from __future__ import annotations

import pytest

from jirafield.domain.results import (
    FailureKind,
    RemoteIssueError,
    SubmissionFailure,
    classify_status,
)


@pytest.mark.parametrize(
    ("status", "kind"),
    [
        (404, FailureKind.NOT_FOUND),
        (403, FailureKind.FORBIDDEN),
        (401, FailureKind.UNAUTHORIZED),
        (500, FailureKind.OTHER),
        (400, FailureKind.OTHER),
        (None, FailureKind.OTHER),
    ],
)
def test_classify_status(status: int | None, kind: FailureKind) -> None:
    assert classify_status(status) is kind


def test_submission_failure_from_error_keeps_status() -> None:
    failure = SubmissionFailure.from_error("PROJ-1", RemoteIssueError("nope", status_code=401))

    assert failure.issue_id == "PROJ-1"
    assert failure.message == "nope"
    assert failure.kind is FailureKind.UNAUTHORIZED
