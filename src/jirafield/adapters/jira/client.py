"""HTTP session and site for the Jira REST API."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from jirafield.adapters.http_resilience import ResilientClient
from jirafield.config.http_resilience import ResilienceConfig
from jirafield.config.jira import JiraConfig, get_jira_config
from jirafield.domain.results import SubmissionFailure, SubmissionResult, SubmissionSuccess

from .schema import EditIssueRequest, ErrorCollection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jirafield.domain.fields import FieldUpdate

log = getLogger(__name__)

ISSUE_PATH = "rest/api/2/issue/{issue_id}"

ClientFactory = Callable[[ResilienceConfig, httpx.Auth | None], ResilientClient]


def _default_client_factory(config: ResilienceConfig, auth: httpx.Auth | None) -> ResilientClient:
    return ResilientClient(config, auth=auth)


def describe_error_response(response: httpx.Response) -> str:
    summary = f"Jira responded with {response.status_code} {response.reason_phrase}".rstrip()
    try:
        details = ErrorCollection.model_validate(response.json()).describe()
    except (ValueError, ValidationError):
        details = None
    if details:
        return f"{summary}: {details}"
    return summary


@dataclass(slots=True)
class JiraSession:
    """Authenticated session applying field edits through ``PUT /issue/{id}``."""

    config: JiraConfig
    client_factory: ClientFactory = field(default=_default_client_factory)

    def apply_field_updates(
        self, issue_id: str, updates: Sequence[FieldUpdate]
    ) -> SubmissionResult:
        return asyncio.run(self._apply_field_updates_async(issue_id, updates))

    async def _apply_field_updates_async(
        self, issue_id: str, updates: Sequence[FieldUpdate]
    ) -> SubmissionResult:
        payload = EditIssueRequest.from_updates(updates)
        path = ISSUE_PATH.format(issue_id=quote(issue_id, safe=""))
        log.debug("Updating %s with fields %s", issue_id, sorted(payload.fields))

        async with self.client_factory(self.config.resilience, self._auth()) as client:
            try:
                response = await client.put(path, json=payload.model_dump())
            except httpx.HTTPError as exc:
                return SubmissionFailure(
                    issue_id=issue_id,
                    message=f"Failed to reach Jira at {self.config.base_url}: {exc}",
                )

        if response.is_success:
            return SubmissionSuccess(issue_id=issue_id)
        return SubmissionFailure(
            issue_id=issue_id,
            message=describe_error_response(response),
            status_code=response.status_code,
        )

    def _auth(self) -> httpx.Auth | None:
        credentials = self.config.credentials
        if credentials is None:
            return None
        return httpx.BasicAuth(credentials.user, credentials.api_token)


@dataclass(slots=True)
class JiraSite:
    """A configured Jira instance; only yields a session when credentials are set."""

    config: JiraConfig
    client_factory: ClientFactory = field(default=_default_client_factory)

    @property
    def url(self) -> str:
        return self.config.base_url

    def get_session(self) -> JiraSession | None:
        if self.config.credentials is None:
            log.debug("No credentials configured for Jira site %s", self.url)
            return None
        return JiraSession(config=self.config, client_factory=self.client_factory)


def get_jira_site(config: JiraConfig | None = None) -> JiraSite | None:
    """Return the Jira site from ``config`` or the environment, if one is configured."""

    effective = config or get_jira_config()
    if effective is None:
        return None
    return JiraSite(config=effective)
