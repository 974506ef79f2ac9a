"""Apply one custom field update to every issue a build pertains to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jirafield.domain.fields import FieldUpdate, build_field_update
from jirafield.domain.results import (
    FailureKind,
    RemoteIssueError,
    SubmissionFailure,
    SubmissionResult,
)
from jirafield.domain.run import RunResult

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from jirafield.domain.ports.selection import IssueSelector
    from jirafield.domain.ports.session import IssueSession, IssueSite
    from jirafield.domain.run import BuildRun

LOG_PREFIX = "[Jira][IssueFieldUpdateStep]"

NO_SITE_MESSAGE = (
    "[Jira] No Jira site is configured for this build. This must be a configuration error."
)
NO_REMOTE_ACCESS_MESSAGE = "[Jira] Remote access to the Jira site is not available."

_FAILURE_MESSAGES: dict[FailureKind, str] = {
    FailureKind.NOT_FOUND: "{issue_id} - Jira issue not found",
    FailureKind.FORBIDDEN: "{issue_id} - Jira user does not have permission to update this issue",
    FailureKind.UNAUTHORIZED: "{issue_id} - Jira authentication problem",
}


class IssueSelectorMissingError(RuntimeError):
    """Raised when the step runs without an issue selection strategy."""


@dataclass(slots=True)
class FieldUpdateReport:
    """Outcome of one step execution."""

    field_update: FieldUpdate | None = None
    attempted: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    failures: list[SubmissionFailure] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return not self.attempted


@dataclass(slots=True)
class IssueFieldUpdateStep:
    """Build step updating a custom field on the issues picked by ``issue_selector``."""

    issue_selector: IssueSelector | None
    field_id: str
    field_value: str
    field_type_multiple: bool = False

    def perform(self, run: BuildRun, site: IssueSite | None) -> FieldUpdateReport:
        log = run.log
        report = FieldUpdateReport()

        selector = self.issue_selector
        if selector is None:
            log.error("%s No issue selector found!", LOG_PREFIX)
            raise IssueSelectorMissingError(f"{LOG_PREFIX} No issue selector found!")

        if site is None:
            log.error(NO_SITE_MESSAGE)
            run.set_result(RunResult.FAILURE)
            return report

        session = site.get_session()
        if session is None:
            log.error(NO_REMOTE_ACCESS_MESSAGE)
            run.set_result(RunResult.FAILURE)
            return report

        issues = selector.resolve(run, site, log)
        if not issues:
            log.info("%s Issue list is empty!", LOG_PREFIX)
            return report

        field_update = build_field_update(
            self.field_id,
            self.field_value,
            environment=run.environment,
            multiple=self.field_type_multiple,
        )
        report.field_update = field_update
        fields = (field_update,)

        for issue_id in issues:
            report.attempted.append(issue_id)
            result = submit_fields(session, issue_id, fields, log)
            if isinstance(result, SubmissionFailure):
                report.failures.append(result)
            else:
                report.updated.append(issue_id)

        log.info(
            "%s Updated %s of %s issue(s) with %s",
            LOG_PREFIX,
            len(report.updated),
            len(report.attempted),
            field_update.field_id,
        )
        return report


def submit_fields(
    session: IssueSession,
    issue_id: str,
    fields: Sequence[FieldUpdate],
    log: logging.Logger,
) -> SubmissionResult:
    """Submit ``fields`` to one issue, logging rather than raising on failure."""

    try:
        result = session.apply_field_updates(issue_id, fields)
    except RemoteIssueError as exc:
        result = SubmissionFailure.from_error(issue_id, exc)
    except Exception as exc:  # noqa: BLE001
        result = SubmissionFailure(issue_id=issue_id, message=str(exc) or type(exc).__name__)

    if isinstance(result, SubmissionFailure):
        template = _FAILURE_MESSAGES.get(result.kind)
        if template is not None:
            log.warning(template.format(issue_id=issue_id))
        log.warning("[Jira] Failed to update issue %s", issue_id)
        log.warning(result.message)
    return result
