"""Ports for talking to a remote issue tracker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jirafield.domain.fields import FieldUpdate
    from jirafield.domain.results import SubmissionResult


@runtime_checkable
class IssueSession(Protocol):
    """Authenticated handle to the tracker's API."""

    def apply_field_updates(
        self, issue_id: str, updates: Sequence[FieldUpdate]
    ) -> SubmissionResult: ...


@runtime_checkable
class IssueSite(Protocol):
    """A configured tracker instance."""

    @property
    def url(self) -> str: ...

    def get_session(self) -> IssueSession | None:
        """Return a session, or ``None`` when remote access is unavailable."""
        ...


__all__ = ["IssueSession", "IssueSite"]
