"""Integration tests for the marketplace workflows and their notifications."""

from __future__ import annotations


def test_signup_rules(client, sign_up):
    sign_up("tina")

    duplicate = client.post(
        "/auth/signup", json={"email": "tina@example.com", "password": "another-pass"}
    )
    assert duplicate.status_code == 400

    admin = client.post(
        "/auth/signup",
        json={"email": "root@example.com", "password": "secret-password", "role": "admin"},
    )
    assert admin.status_code == 400

    bad_login = client.post(
        "/auth/token", data={"username": "tina@example.com", "password": "wrong-password"}
    )
    assert bad_login.status_code == 401

    good_login = client.post(
        "/auth/token", data={"username": "tina@example.com", "password": "secret-password"}
    )
    assert good_login.status_code == 200
    me = client.get(
        "/auth/me", headers={"Authorization": f"Bearer {good_login.json()['access_token']}"}
    )
    assert me.json()["role"] == "tenant"


def test_requests_without_a_valid_token_are_rejected(client):
    assert client.get("/notifications/").status_code == 401
    assert client.get("/notifications/", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_profile_update(client, sign_up):
    tenant = sign_up("tina")

    response = client.put(
        "/profiles/me", json={"phone": "0917 000 0000", "bio": "Nursing student"}, headers=tenant.headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["phone"] == "0917 000 0000"
    assert body["full_name"] == "Tina"
    assert client.get("/profiles/me", headers=tenant.headers).json()["bio"] == "Nursing student"


def test_only_landlords_publish_and_only_owners_change_status(client, sign_up, listing):
    landlord, created = listing
    tenant = sign_up("tina")
    rival = sign_up("rival", "landlord")

    forbidden = client.post(
        "/properties/",
        json={"title": "x", "address": "y", "city": "z", "rent": "1"},
        headers=tenant.headers,
    )
    assert forbidden.status_code == 403

    not_owner = client.patch(
        f"/properties/{created['id']}/status", json={"status": "occupied"}, headers=rival.headers
    )
    assert not_owner.status_code == 403

    updated = client.patch(
        f"/properties/{created['id']}/status", json={"status": "occupied"}, headers=landlord.headers
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "occupied"

    occupied = client.get("/properties/", params={"status": "occupied"}).json()
    assert [item["id"] for item in occupied] == [created["id"]]
    assert client.get("/properties/", params={"city": "Manila"}).json() == []
    assert client.get("/properties/does-not-exist").status_code == 404


def test_booking_request_notifies_the_landlord(client, sign_up, listing):
    landlord, created = listing
    tenant = sign_up("tina")

    booking = client.post(
        "/reservations/",
        json={"property_id": created["id"], "check_in": "2024-06-01", "check_out": "2024-11-30"},
        headers=tenant.headers,
    )
    assert booking.status_code == 201, booking.text
    assert booking.json()["status"] == "pending"

    notifications = client.get("/notifications/", headers=landlord.headers).json()
    assert len(notifications) == 1
    notification = notifications[0]
    assert notification["type"] == "booking"
    assert notification["title"] == "New Booking Request"
    assert notification["message"] == "You have a new booking request for Sunny Bedspace"
    assert notification["link"] == "/dashboard/landlord"
    assert notification["is_read"] is False
    assert client.get("/notifications/", headers=tenant.headers).json() == []

    landlord_view = client.get("/reservations/", headers=landlord.headers).json()
    assert [item["id"] for item in landlord_view] == [booking.json()["id"]]


def test_marking_a_notification_read_returns_the_refreshed_list(client, sign_up, listing):
    landlord, created = listing
    tenant = sign_up("tina")
    client.post(
        "/reservations/",
        json={"property_id": created["id"], "check_in": "2024-06-01"},
        headers=tenant.headers,
    )
    [notification] = client.get("/notifications/", headers=landlord.headers).json()

    foreign = client.post(f"/notifications/{notification['id']}/read", headers=tenant.headers)
    assert foreign.status_code == 200
    assert foreign.json() == []

    response = client.post(f"/notifications/{notification['id']}/read", headers=landlord.headers)

    assert response.status_code == 200
    assert [item["is_read"] for item in response.json()] == [True]
    unread = client.get("/notifications/", params={"unread_only": True}, headers=landlord.headers)
    assert unread.json() == []


def test_booking_validation(client, sign_up, listing):
    landlord, created = listing
    tenant = sign_up("tina")

    missing_property = client.post(
        "/reservations/",
        json={"property_id": "missing", "check_in": "2024-06-01"},
        headers=tenant.headers,
    )
    assert missing_property.status_code == 404

    reversed_dates = client.post(
        "/reservations/",
        json={"property_id": created["id"], "check_in": "2024-06-10", "check_out": "2024-06-01"},
        headers=tenant.headers,
    )
    assert reversed_dates.status_code == 400

    by_landlord = client.post(
        "/reservations/",
        json={"property_id": created["id"], "check_in": "2024-06-01"},
        headers=landlord.headers,
    )
    assert by_landlord.status_code == 403


def test_reservation_decision_and_payment_verification(client, sign_up, listing):
    landlord, created = listing
    tenant = sign_up("tina")
    reservation = client.post(
        "/reservations/",
        json={"property_id": created["id"], "check_in": "2024-06-01"},
        headers=tenant.headers,
    ).json()

    tenant_approval = client.patch(
        f"/reservations/{reservation['id']}/status", json={"status": "approved"}, headers=tenant.headers
    )
    assert tenant_approval.status_code == 403

    approved = client.patch(
        f"/reservations/{reservation['id']}/status", json={"status": "approved"}, headers=landlord.headers
    )
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"

    again = client.patch(
        f"/reservations/{reservation['id']}/status", json={"status": "declined"}, headers=landlord.headers
    )
    assert again.status_code == 400

    tenant_notes = client.get("/notifications/", headers=tenant.headers).json()
    assert [note["title"] for note in tenant_notes] == ["Booking Approved"]

    payment = client.post(
        "/payments/",
        json={"reservation_id": reservation["id"], "amount": "2500.00", "method": "gcash"},
        headers=tenant.headers,
    )
    assert payment.status_code == 201, payment.text
    assert payment.json()["status"] == "pending"

    verified = client.patch(
        f"/payments/{payment.json()['id']}/verification",
        json={"status": "verified"},
        headers=landlord.headers,
    )
    assert verified.status_code == 200
    body = verified.json()
    assert body["status"] == "verified"
    assert body["verified_by"] == landlord.id
    assert body["verified_at"] is not None

    assert [item["id"] for item in client.get("/payments/", headers=landlord.headers).json()] == [
        body["id"]
    ]
    landlord_titles = {note["title"] for note in client.get("/notifications/", headers=landlord.headers).json()}
    assert landlord_titles == {"New Booking Request", "Payment Submitted"}


def test_tenant_cancels_own_pending_reservation(client, sign_up, listing):
    landlord, created = listing
    tenant = sign_up("tina")
    reservation = client.post(
        "/reservations/",
        json={"property_id": created["id"], "check_in": "2024-06-01"},
        headers=tenant.headers,
    ).json()

    cancelled = client.patch(
        f"/reservations/{reservation['id']}/status", json={"status": "cancelled"}, headers=tenant.headers
    )

    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelled"


def test_review_moderation_queue(client, sign_up, listing):
    _, created = listing
    tenant = sign_up("tina")
    admin = sign_up("ada", "admin")

    for rating in (5, 1):
        response = client.post(
            "/reviews/",
            json={"property_id": created["id"], "rating": rating, "comment": f"{rating} stars"},
            headers=tenant.headers,
        )
        assert response.status_code == 201
    assert client.post(
        "/reviews/", json={"property_id": created["id"], "rating": 9}, headers=tenant.headers
    ).status_code == 422

    assert client.get("/reviews/pending", headers=tenant.headers).status_code == 403
    pending = client.get("/reviews/pending", headers=admin.headers).json()
    by_rating = {review["rating"]: review for review in pending}

    approve = client.patch(
        f"/reviews/{by_rating[5]['id']}/moderation", json={"approved": True}, headers=admin.headers
    )
    reject = client.patch(
        f"/reviews/{by_rating[1]['id']}/moderation", json={"approved": False}, headers=admin.headers
    )
    assert approve.json()["is_approved"] is True
    assert reject.json()["is_approved"] is False
    assert client.get("/reviews/pending", headers=admin.headers).json() == []

    detail = client.get(f"/properties/{created['id']}").json()
    assert detail["landlord"]["display_name"] == "Lando"
    assert [review["rating"] for review in detail["reviews"]] == [5]
    assert [note["type"] for note in client.get("/notifications/", headers=tenant.headers).json()] == [
        "review"
    ]

    stats = client.get("/admin/stats", headers=admin.headers).json()
    assert stats == {
        "users": 3,
        "properties": 1,
        "reservations": 0,
        "payments": 0,
        "pending_reviews": 0,
    }


def test_admin_user_list(client, sign_up, listing):
    landlord, _ = listing
    tenant = sign_up("tina")
    admin = sign_up("ada", "admin")

    assert client.get("/admin/users", headers=tenant.headers).status_code == 403

    response = client.get("/admin/users", headers=admin.headers)
    assert response.status_code == 200
    roles = {user["email"]: user["role"] for user in response.json()}
    assert roles == {
        "lando@example.com": "landlord",
        "tina@example.com": "tenant",
        "ada@example.com": "admin",
    }

    limited = client.get("/admin/users", params={"limit": 2}, headers=admin.headers)
    assert len(limited.json()) == 2
    assert client.get("/admin/users", params={"limit": 0}, headers=admin.headers).status_code == 422
