"""Validation helpers shared by the user use cases."""

from __future__ import annotations

from boardingfinder.domain.errors import ValidationError

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str | None) -> str:
    value = (email or "").strip().lower()
    if not value or "@" not in value:
        raise ValidationError("A valid email address is required")
    return value


def validate_password(password: str | None) -> None:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
