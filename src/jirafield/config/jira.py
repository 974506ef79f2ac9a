"""Jira site configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, optional_float_env_var
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

JIRA_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class JiraCredentials:
    user: str
    api_token: str


@dataclass(frozen=True, slots=True)
class JiraConfig:
    """Holds the Jira site URL and, when remote access is set up, its credentials."""

    base_url: str
    credentials: JiraCredentials | None
    resilience: ResilienceConfig


def jira_resilience(base_url: str, *, timeout_seconds: float = JIRA_TIMEOUT_SECONDS) -> ResilienceConfig:
    return ResilienceConfig(
        name="jira",
        base_url=base_url,
        timeout_seconds=timeout_seconds,
        retry=RetryPolicy(total=4),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"Accept": "application/json"},
    )


def get_jira_config() -> JiraConfig | None:
    """Load the Jira site from the environment.

    Returns ``None`` when ``JIRA_URL`` is unset, which callers treat as "no site
    configured". Missing credentials leave ``credentials`` empty so that the site
    exists but cannot open a session.
    """

    base_url = optional_env_var("JIRA_URL")
    if base_url is None:
        return None
    base_url = base_url.rstrip("/")

    user = optional_env_var("JIRA_USER")
    api_token = optional_env_var("JIRA_API_TOKEN")
    credentials = (
        JiraCredentials(user=user, api_token=api_token) if user and api_token else None
    )
    timeout = optional_float_env_var("JIRA_TIMEOUT_SECONDS", JIRA_TIMEOUT_SECONDS)

    return JiraConfig(
        base_url=base_url,
        credentials=credentials,
        resilience=jira_resilience(base_url, timeout_seconds=timeout),
    )
