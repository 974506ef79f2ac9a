"""Outcome types for submitting field updates to a remote issue."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from http import HTTPStatus


class FailureKind(StrEnum):
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    OTHER = "other"


_KIND_BY_STATUS: dict[int, FailureKind] = {
    HTTPStatus.NOT_FOUND: FailureKind.NOT_FOUND,
    HTTPStatus.FORBIDDEN: FailureKind.FORBIDDEN,
    HTTPStatus.UNAUTHORIZED: FailureKind.UNAUTHORIZED,
}


def classify_status(status_code: int | None) -> FailureKind:
    if status_code is None:
        return FailureKind.OTHER
    return _KIND_BY_STATUS.get(status_code, FailureKind.OTHER)


class RemoteIssueError(RuntimeError):
    """Raised by sessions that signal per-issue failures with exceptions."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True, slots=True)
class SubmissionSuccess:
    issue_id: str


@dataclass(frozen=True, slots=True)
class SubmissionFailure:
    issue_id: str
    message: str
    status_code: int | None = None

    @property
    def kind(self) -> FailureKind:
        return classify_status(self.status_code)

    @classmethod
    def from_error(cls, issue_id: str, error: RemoteIssueError) -> SubmissionFailure:
        return cls(issue_id=issue_id, message=str(error), status_code=error.status_code)


SubmissionResult = SubmissionSuccess | SubmissionFailure
