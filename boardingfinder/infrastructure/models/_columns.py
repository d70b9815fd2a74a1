"""Column defaults shared by the ORM models."""

from __future__ import annotations

import uuid

from boardingfinder.utils import now_utc


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now():
    return now_utc()
