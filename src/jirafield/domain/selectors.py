"""Issue selection strategies."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jirafield.domain.fields import expand_variables
from jirafield.domain.ports.selection import IssueSelector

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

    from jirafield.domain.ports.session import IssueSite
    from jirafield.domain.run import BuildRun

DEFAULT_ISSUE_PATTERN = re.compile(r"(?<![A-Za-z0-9_])([A-Za-z][A-Za-z0-9_]+-[1-9][0-9]*)(?![0-9])")


@dataclass(slots=True)
class ExplicitIssueSelector:
    """Selects a fixed list of issue keys, expanded against the run environment.

    Each entry may hold several keys separated by commas or whitespace.
    """

    issue_keys: tuple[str, ...] = ()

    def resolve(self, run: BuildRun, site: IssueSite, log: logging.Logger) -> set[str]:
        del site
        issues: set[str] = set()
        for entry in self.issue_keys:
            expanded = expand_variables(entry, run.environment)
            issues.update(key for key in re.split(r"[\s,]+", expanded) if key)
        log.debug("Explicitly selected issues: %s", sorted(issues))
        return issues


@dataclass(slots=True)
class ChangelogIssueSelector:
    """Selects issue keys mentioned in change messages, e.g. commit subjects."""

    messages: tuple[str, ...] = ()
    pattern: re.Pattern[str] = field(default=DEFAULT_ISSUE_PATTERN)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ChangelogIssueSelector:
        return cls(messages=tuple(line.rstrip("\n") for line in lines))

    def resolve(self, run: BuildRun, site: IssueSite, log: logging.Logger) -> set[str]:
        del run, site
        issues: set[str] = set()
        for message in self.messages:
            for match in self.pattern.finditer(message):
                issues.add(match.group(1).upper())
        log.debug("Found %s issue(s) in %s change message(s)", len(issues), len(self.messages))
        return issues


if TYPE_CHECKING:
    _explicit_check: IssueSelector = ExplicitIssueSelector()
    _changelog_check: IssueSelector = ChangelogIssueSelector()
