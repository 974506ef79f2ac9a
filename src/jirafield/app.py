"""Application orchestration entry points."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from jirafield.adapters.jira import get_jira_site
from jirafield.domain.field_update import FieldUpdateReport, IssueFieldUpdateStep
from jirafield.domain.run import BuildRun, RunResult

if TYPE_CHECKING:
    from jirafield.config.step import FieldUpdateStepConfig
    from jirafield.domain.ports.selection import IssueSelector
    from jirafield.domain.ports.session import IssueSite

SiteProvider = Callable[[], "IssueSite | None"]


log = getLogger(__name__)


@dataclass(slots=True)
class FieldUpdateStepOutcome:
    result: RunResult
    report: FieldUpdateReport


def run_field_update_step(
    config: FieldUpdateStepConfig,
    *,
    selector: IssueSelector | None,
    site_provider: SiteProvider = get_jira_site,
    run: BuildRun | None = None,
) -> FieldUpdateStepOutcome:
    """Run the field update step against the configured Jira site."""

    effective_run = run or BuildRun(environment=dict(os.environ))
    step = IssueFieldUpdateStep(
        issue_selector=selector,
        field_id=config.field_id,
        field_value=config.field_value,
        field_type_multiple=config.field_type_multiple,
    )
    log.info(
        "Starting issue field update: field_id=%s, multiple=%s, selector=%s",
        config.field_id,
        config.field_type_multiple,
        type(selector).__name__ if selector is not None else None,
    )

    report = step.perform(effective_run, site_provider())

    log.info(
        "Finished issue field update: attempted=%s, updated=%s, failed=%s, result=%s",
        len(report.attempted),
        len(report.updated),
        len(report.failures),
        effective_run.result.name,
    )
    return FieldUpdateStepOutcome(result=effective_run.result, report=report)
