"""Shared fixtures: an isolated SQLite database and data service per test."""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

from datetime import datetime, timedelta, timezone

import pytest

from boardingfinder.config import reset_settings_cache
from boardingfinder.domain.entities import Identity, SessionContext, UserRole
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from boardingfinder.infrastructure.realtime import ChangeFeed

reset_settings_cache()

BASE_TIME = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)


class Seeder:
    """Insert fixture rows with deterministic timestamps."""

    def __init__(self, data: DataService) -> None:
        self.data = data

    @staticmethod
    def at(minute: int) -> datetime:
        return BASE_TIME + timedelta(minutes=minute)

    @staticmethod
    def context(user_id: str, role: UserRole = UserRole.TENANT) -> SessionContext:
        return SessionContext(
            identity=Identity(id=user_id, email=f"{user_id}@example.com"), role=role
        )

    async def profile(self, name: str) -> str:
        row = await self.data.insert(
            "profiles", {"email": f"{name}@example.com", "full_name": name.title()}
        )
        return row["id"]

    async def message(
        self,
        sender_id: str,
        receiver_id: str,
        content: str,
        *,
        minute: int,
        is_read: bool = False,
    ) -> dict:
        return await self.data.insert(
            "messages",
            {
                "sender_id": sender_id,
                "receiver_id": receiver_id,
                "content": content,
                "is_read": is_read,
                "created_at": self.at(minute),
            },
        )

    async def listing(self, landlord_id: str, title: str = "Cozy Room") -> str:
        row = await self.data.insert(
            "properties",
            {
                "landlord_id": landlord_id,
                "title": title,
                "address": "12 Mabini St",
                "city": "Baguio",
                "rent": 3500,
            },
        )
        return row["id"]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'boardingfinder.db'}")
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def change_feed() -> ChangeFeed:
    return ChangeFeed()


@pytest.fixture
def data(engine, change_feed) -> DataService:
    return DataService(build_session_factory(engine), change_feed)


@pytest.fixture
def seed(data) -> Seeder:
    return Seeder(data)
