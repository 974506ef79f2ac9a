from __future__ import annotations

from typing import TYPE_CHECKING

from jirafield.domain.ports.selection import IssueSelector
from jirafield.domain.selectors import ChangelogIssueSelector, ExplicitIssueSelector

if TYPE_CHECKING:
    from jirafield.domain.run import BuildRun
    from tests.support.issues import FakeSite


def test_explicit_selector_splits_and_expands_keys(build_run: BuildRun, site: FakeSite) -> None:
    build_run.environment = {"RELEASE_ISSUE": "REL-7"}
    selector = ExplicitIssueSelector(issue_keys=("PROJ-1, PROJ-2", "$RELEASE_ISSUE", "PROJ-1"))

    assert selector.resolve(build_run, site, build_run.log) == {"PROJ-1", "PROJ-2", "REL-7"}


def test_explicit_selector_without_keys_is_empty(build_run: BuildRun, site: FakeSite) -> None:
    assert ExplicitIssueSelector().resolve(build_run, site, build_run.log) == set()


def test_changelog_selector_finds_issue_keys(build_run: BuildRun, site: FakeSite) -> None:
    selector = ChangelogIssueSelector.from_lines(
        [
            "PROJ-12: fix login redirect\n",
            "Merge branch 'feature/proj-13-search' (see also OPS-4)\n",
            "bump version to 1.2-3\n",
            "no issue here\n",
        ]
    )

    assert selector.resolve(build_run, site, build_run.log) == {"PROJ-12", "PROJ-13", "OPS-4"}


def test_changelog_selector_ignores_zero_numbered_keys(build_run: BuildRun, site: FakeSite) -> None:
    selector = ChangelogIssueSelector(messages=("PROJ-0 is not an issue",))

    assert selector.resolve(build_run, site, build_run.log) == set()


def test_selectors_satisfy_port() -> None:
    assert isinstance(ExplicitIssueSelector(), IssueSelector)
    assert isinstance(ChangelogIssueSelector(), IssueSelector)
