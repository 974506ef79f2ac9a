"""Ports for resolving which issues a build pertains to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import logging

    from jirafield.domain.run import BuildRun

    from .session import IssueSite


@runtime_checkable
class IssueSelector(Protocol):
    """Strategy producing the issue identifiers relevant to a build run."""

    def resolve(self, run: BuildRun, site: IssueSite, log: logging.Logger) -> set[str]: ...


__all__ = ["IssueSelector"]
