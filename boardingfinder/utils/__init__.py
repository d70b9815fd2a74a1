"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_utc,
    get_app_timezone,
    isoformat_or_none,
    now_utc,
    to_app_timezone,
)

__all__ = [
    "ensure_utc",
    "get_app_timezone",
    "isoformat_or_none",
    "now_utc",
    "to_app_timezone",
]
