"""Fixtures for exercising the HTTP and websocket API."""

from __future__ import annotations

from functools import partial

import anyio
import pytest
from fastapi.testclient import TestClient

from boardingfinder.application.use_cases.users import create_admin_user
from boardingfinder.interfaces.api.dependencies import get_data_service

PASSWORD = "secret-password"


class ApiUser:
    def __init__(self, client: TestClient, email: str, token: str) -> None:
        self.email = email
        self.token = token
        self.headers = {"Authorization": f"Bearer {token}"}
        self.id = client.get("/auth/me", headers=self.headers).json()["id"]


@pytest.fixture
def client(data):
    """Return a test client whose routes use the per-test data service."""

    from main import create_app

    app = create_app()
    app.dependency_overrides[get_data_service] = lambda: data
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sign_up(client, data):
    def _sign_up(name: str, role: str = "tenant") -> ApiUser:
        email = f"{name}@example.com"
        if role == "admin":
            anyio.run(
                partial(create_admin_user, data, email=email, password=PASSWORD, full_name=name.title())
            )
            response = client.post("/auth/token", data={"username": email, "password": PASSWORD})
            assert response.status_code == 200, response.text
        else:
            response = client.post(
                "/auth/signup",
                json={"email": email, "password": PASSWORD, "full_name": name.title(), "role": role},
            )
            assert response.status_code == 201, response.text
        return ApiUser(client, email, response.json()["access_token"])

    return _sign_up


@pytest.fixture
def listing(client, sign_up):
    """A landlord with one published listing."""

    landlord = sign_up("lando", "landlord")
    response = client.post(
        "/properties/",
        json={
            "title": "Sunny Bedspace",
            "address": "8 Session Rd",
            "city": "Baguio",
            "rent": "2500.00",
            "facilities": ["wifi"],
        },
        headers=landlord.headers,
    )
    assert response.status_code == 201, response.text
    return landlord, response.json()
