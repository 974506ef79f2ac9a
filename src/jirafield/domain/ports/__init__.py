"""Domain port definitions for adapters."""

from __future__ import annotations

from .selection import IssueSelector
from .session import IssueSession, IssueSite

__all__ = ["IssueSelector", "IssueSession", "IssueSite"]
