from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable

import httpx
import pytest

from jirafield.adapters.http_resilience import ResilienceConfig, ResilientClient
from jirafield.adapters.jira import (
    EditIssueRequest,
    JiraSession,
    JiraSite,
    describe_error_response,
    get_jira_site,
)
from jirafield.config.http_resilience import RetryPolicy
from jirafield.config.jira import JiraConfig, JiraCredentials, jira_resilience
from jirafield.domain.fields import FieldUpdate
from jirafield.domain.results import FailureKind, SubmissionFailure, SubmissionSuccess

BASE_URL = "https://jira.example.com/jira"


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig, httpx.Auth | None], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig, auth: httpx.Auth | None) -> ResilientClient:
        return ResilientClient(
            resilience, auth=auth, transport=httpx.MockTransport(async_handler)
        )

    return factory


def _config(*, credentials: JiraCredentials | None = None) -> JiraConfig:
    return JiraConfig(
        base_url=BASE_URL,
        credentials=credentials or JiraCredentials(user="ci-bot", api_token="secret"),
        resilience=dataclasses.replace(
            jira_resilience(BASE_URL),
            retry=RetryPolicy(backoff_factor=0.0, backoff_jitter=0.0),
        ),
    )


def test_session_puts_fields_to_issue_endpoint() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(204)

    session = JiraSession(config=_config(), client_factory=_make_client_factory(handler))

    result = session.apply_field_updates(
        "PROJ-1", [FieldUpdate("customfield_10100", ("release-42",))]
    )

    assert result == SubmissionSuccess(issue_id="PROJ-1")
    (request,) = captured
    assert request.method == "PUT"
    assert request.url.path == "/jira/rest/api/2/issue/PROJ-1"
    assert json.loads(request.content) == {"fields": {"customfield_10100": ["release-42"]}}
    assert request.headers["Authorization"].startswith("Basic ")


def test_session_retries_transient_server_errors() -> None:
    statuses = iter([503, 204])
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(next(statuses))

    session = JiraSession(config=_config(), client_factory=_make_client_factory(handler))

    result = session.apply_field_updates("PROJ-1", [FieldUpdate("customfield_1", "x")])

    assert result == SubmissionSuccess(issue_id="PROJ-1")
    assert [request.method for request in captured] == ["PUT", "PUT"]


def test_session_gives_up_after_retry_budget() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(503)

    session = JiraSession(config=_config(), client_factory=_make_client_factory(handler))

    result = session.apply_field_updates("PROJ-1", [FieldUpdate("customfield_1", "x")])

    assert isinstance(result, SubmissionFailure)
    assert result.status_code == 503
    assert result.kind is FailureKind.OTHER
    assert len(captured) == 5


def test_session_reports_status_and_jira_error_messages() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(
            404,
            json={"errorMessages": ["Issue does not exist"], "errors": {}},
        )

    session = JiraSession(config=_config(), client_factory=_make_client_factory(handler))

    result = session.apply_field_updates("PROJ-404", [FieldUpdate("customfield_1", "x")])

    assert isinstance(result, SubmissionFailure)
    assert result.status_code == 404
    assert result.kind is FailureKind.NOT_FOUND
    assert result.message == "Jira responded with 404 Not Found: Issue does not exist"


def test_session_converts_transport_errors_into_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    session = JiraSession(config=_config(), client_factory=_make_client_factory(handler))

    result = session.apply_field_updates("PROJ-1", [FieldUpdate("customfield_1", "x")])

    assert isinstance(result, SubmissionFailure)
    assert result.status_code is None
    assert result.kind is FailureKind.OTHER
    assert "connection refused" in result.message


def test_describe_error_response_includes_field_errors() -> None:
    response = httpx.Response(
        400,
        json={"errorMessages": [], "errors": {"customfield_1": "Field cannot be set"}},
    )

    assert (
        describe_error_response(response)
        == "Jira responded with 400 Bad Request: customfield_1: Field cannot be set"
    )


def test_describe_error_response_without_json_body() -> None:
    response = httpx.Response(502, text="<html>bad gateway</html>")

    assert describe_error_response(response) == "Jira responded with 502 Bad Gateway"


def test_edit_issue_request_serialises_scalar_and_list_values() -> None:
    request = EditIssueRequest.from_updates(
        [FieldUpdate("customfield_1", "a"), FieldUpdate("customfield_2", ("b",))]
    )

    assert request.model_dump() == {"fields": {"customfield_1": "a", "customfield_2": ["b"]}}


def test_site_without_credentials_has_no_session() -> None:
    config = JiraConfig(base_url=BASE_URL, credentials=None, resilience=jira_resilience(BASE_URL))

    assert JiraSite(config=config).get_session() is None


def test_site_with_credentials_opens_session() -> None:
    site = JiraSite(config=_config())

    session = site.get_session()

    assert isinstance(session, JiraSession)
    assert site.url == BASE_URL


def test_get_jira_site_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JIRA_URL", "https://jira.example.com/")
    monkeypatch.setenv("JIRA_USER", "ci-bot")
    monkeypatch.setenv("JIRA_API_TOKEN", "secret")

    site = get_jira_site()

    assert site is not None
    assert site.url == "https://jira.example.com"
    assert site.get_session() is not None


def test_get_jira_site_without_url_is_none() -> None:
    assert get_jira_site() is None
