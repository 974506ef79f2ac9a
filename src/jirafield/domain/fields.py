"""Field update values and the helpers that build them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

FIELD_ID_PREFIX = "customfield_"

_VARIABLE_PATTERN = re.compile(r"\$(\$|\{([A-Za-z0-9_.]+)\}|([A-Za-z0-9_]+))")
_FIELD_ID_PATTERN = re.compile(r"\d+")

FieldValue = str | tuple[str]


@dataclass(frozen=True, slots=True)
class FieldUpdate:
    """A single ``(field id, value)`` pair applied to an issue.

    ``value`` is a one-element tuple for fields the tracker stores as a list of
    values, a plain string otherwise.
    """

    field_id: str
    value: FieldValue

    def payload_value(self) -> str | list[str]:
        if isinstance(self.value, tuple):
            return list(self.value)
        return self.value


def normalize_field_id(field_id: str) -> str:
    """Prefix ``field_id`` with ``customfield_`` unless it already carries it."""

    if field_id.startswith(FIELD_ID_PREFIX):
        return field_id
    return FIELD_ID_PREFIX + field_id


def expand_variables(template: str, environment: Mapping[str, str]) -> str:
    """Expand ``$NAME`` and ``${NAME}`` references from ``environment``.

    Unknown variables are left untouched and ``$$`` yields a literal dollar sign.
    """

    def replace(match: re.Match[str]) -> str:
        if match.group(1) == "$":
            return "$"
        name = match.group(2) or match.group(3)
        value = environment.get(name)
        if value is None:
            return match.group(0)
        return value

    return _VARIABLE_PATTERN.sub(replace, template)


def fix_empty_and_trim(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def build_field_update(
    field_id: str,
    value_template: str | None,
    *,
    environment: Mapping[str, str],
    multiple: bool = False,
) -> FieldUpdate:
    """Expand and trim the value once and wrap it for the target field type.

    An empty expansion still produces an update carrying ``""``; it is never
    list-wrapped.
    """

    expanded = fix_empty_and_trim(expand_variables(value_template or "", environment))
    prepared_id = normalize_field_id(field_id)
    if multiple and expanded is not None:
        return FieldUpdate(prepared_id, (expanded,))
    return FieldUpdate(prepared_id, expanded or "")


class ValidationKind(StrEnum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class FieldValidation:
    kind: ValidationKind
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ValidationKind.OK


def check_field_id(value: str | None) -> FieldValidation:
    """Validate a raw custom field id as entered by a user."""

    if not (value or "").strip():
        return FieldValidation(ValidationKind.WARNING, "No issue field id specified")
    if not _FIELD_ID_PATTERN.fullmatch(value or ""):
        return FieldValidation(
            ValidationKind.ERROR,
            "Issue field id must be numeric, e.g. 10100 for customfield_10100",
        )
    return FieldValidation(ValidationKind.OK)
