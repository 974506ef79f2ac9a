"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_float_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .jira import JiraConfig, JiraCredentials, get_jira_config, jira_resilience
from .step import FieldUpdateStepConfig, parse_bool_flag

__all__ = [
    "ConfigurationError",
    "FieldUpdateStepConfig",
    "JiraConfig",
    "JiraCredentials",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "get_jira_config",
    "jira_resilience",
    "optional_env_var",
    "optional_float_env_var",
    "parse_bool_flag",
]
