"""Constructor-time validation helpers shared by the entity dataclasses."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from boardingfinder.domain.errors import ValidationError

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: object, field_name: str) -> E:
    """Return ``value`` as a member of ``enum_cls`` or reject it."""

    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        msg = f"Unrecognized {field_name} {value!r}; expected one of: {allowed}"
        raise ValidationError(msg) from exc


def require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string")
    return value


def optional_text(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_bool(value: object, field_name: str, *, default: bool = False) -> bool:
    # The store reports a missing flag as NULL.
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a boolean")
    return value
