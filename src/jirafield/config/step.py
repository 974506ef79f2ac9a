"""Field update step configuration."""

from __future__ import annotations

from dataclasses import dataclass


def parse_bool_flag(value: str | bool | None) -> bool:
    """Parse a boolean-as-string flag: only ``"true"`` (any case) is true."""

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return value.strip().lower() == "true"


@dataclass(frozen=True, slots=True)
class FieldUpdateStepConfig:
    field_id: str
    field_value: str
    field_type_multiple: bool = False

    @classmethod
    def from_strings(
        cls,
        *,
        field_id: str,
        field_value: str | None,
        field_type_multiple: str | bool | None = None,
    ) -> FieldUpdateStepConfig:
        return cls(
            field_id=field_id.strip(),
            field_value=field_value or "",
            field_type_multiple=parse_bool_flag(field_type_multiple),
        )
