"""Tests for timezone helpers used when presenting timestamps."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from boardingfinder.config import reset_settings_cache
from boardingfinder.utils import datetime as datetime_utils


@pytest.fixture
def app_timezone(monkeypatch):
    def _set(value: str) -> None:
        monkeypatch.setenv("APP_TIMEZONE", value)
        reset_settings_cache()
        datetime_utils.get_app_timezone.cache_clear()

    yield _set
    monkeypatch.delenv("APP_TIMEZONE", raising=False)
    reset_settings_cache()
    datetime_utils.get_app_timezone.cache_clear()


def test_naive_values_are_tagged_as_utc():
    value = datetime(2024, 5, 1, 8, 30)

    assert datetime_utils.ensure_utc(value) == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    assert datetime_utils.ensure_utc(None) is None


@pytest.mark.parametrize(
    ("setting", "offset"),
    [
        ("UTC", timedelta(0)),
        ("UTC+8", timedelta(hours=8)),
        ("GMT-05:30", timedelta(hours=-5, minutes=-30)),
        ("Nowhere/City", timedelta(0)),
    ],
)
def test_app_timezone_accepts_names_and_offsets(app_timezone, setting, offset):
    app_timezone(setting)

    converted = datetime_utils.to_app_timezone(datetime(2024, 5, 1, tzinfo=timezone.utc))

    assert converted.utcoffset() == offset


def test_isoformat_presents_the_app_timezone(app_timezone):
    app_timezone("UTC+08:00")

    rendered = datetime_utils.isoformat_or_none(datetime(2024, 5, 1, 0, 0, tzinfo=timezone.utc))

    assert rendered == "2024-05-01T08:00:00+08:00"
    assert datetime_utils.isoformat_or_none(None) is None
