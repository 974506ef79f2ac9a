"""Public interface for the Jira adapter."""

from __future__ import annotations

from .client import JiraSession, JiraSite, describe_error_response, get_jira_site
from .schema import EditIssueRequest, ErrorCollection

__all__ = [
    "EditIssueRequest",
    "ErrorCollection",
    "JiraSession",
    "JiraSite",
    "describe_error_response",
    "get_jira_site",
]
