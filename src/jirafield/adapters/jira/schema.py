"""Pydantic models describing the Jira REST payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Iterable

    from jirafield.domain.fields import FieldUpdate


class JiraBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class EditIssueRequest(JiraBaseModel):
    fields: dict[str, str | list[str]]

    @classmethod
    def from_updates(cls, updates: Iterable[FieldUpdate]) -> EditIssueRequest:
        return cls(fields={update.field_id: update.payload_value() for update in updates})


class ErrorCollection(JiraBaseModel):
    error_messages: list[str] = Field(default_factory=list, alias="errorMessages")
    errors: dict[str, str] = Field(default_factory=dict)

    def describe(self) -> str | None:
        parts = list(self.error_messages)
        parts.extend(f"{name}: {message}" for name, message in sorted(self.errors.items()))
        if not parts:
            return None
        return "; ".join(parts)
