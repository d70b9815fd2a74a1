"""Tests for constructor-time validation of the domain entities."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from boardingfinder.domain.entities import (
    Identity,
    Message,
    Notification,
    NotificationType,
    Payment,
    Property,
    PropertyStatus,
    Reservation,
    Review,
    SessionContext,
    UserRole,
    UserSummary,
)
from boardingfinder.domain.errors import ValidationError

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


def test_unknown_enum_values_are_rejected():
    with pytest.raises(ValidationError):
        Notification(id=None, user_id="u", type="promotion", title="t", message="m")
    with pytest.raises(ValidationError):
        Property(
            id=None, landlord_id="l", title="t", address="a", city="c", rent=1, status="sold"
        )
    with pytest.raises(ValidationError):
        Payment(id=None, reservation_id="r", amount=10, method="bitcoin")
    with pytest.raises(ValidationError):
        SessionContext(identity=Identity(id="u", email="u@example.com"), role="superuser")


def test_known_enum_values_are_coerced():
    notification = Notification(
        id=None, user_id="u", type="booking", title="t", message="m", is_read=None
    )

    assert notification.type is NotificationType.BOOKING
    assert notification.is_read is False
    listing = Property(
        id=None, landlord_id="l", title="t", address="a", city="c", rent="3500.50"
    )
    assert listing.status is PropertyStatus.AVAILABLE
    assert str(listing.rent) == "3500.50"


def test_reservation_dates_and_amounts_are_checked():
    with pytest.raises(ValidationError):
        Reservation(
            id=None,
            property_id="p",
            tenant_id="t",
            check_in=date(2024, 6, 2),
            check_out=date(2024, 6, 1),
        )
    with pytest.raises(ValidationError):
        Payment(id=None, reservation_id="r", amount=0, method="cash")
    with pytest.raises(ValidationError):
        Review(id=None, property_id="p", tenant_id="t", rating=6)


def test_message_helpers_are_relative_to_a_participant():
    message = Message(
        id="m", sender_id="a", receiver_id="b", content="hi", created_at=NOW, is_read=None
    )

    assert message.is_read is False
    assert message.counterpart_of("a") == "b"
    assert message.counterpart_of("b") == "a"
    assert message.is_unread_for("b") is True
    assert message.is_unread_for("a") is False


def test_session_context_roles():
    context = SessionContext(identity=Identity(id="u", email="u@example.com"), role="admin")

    assert context.user_id == "u"
    assert context.is_admin()
    assert context.has_role(UserRole.ADMIN)


def test_user_summary_display_name_fallbacks():
    assert UserSummary(id="1", full_name="Ana", email="ana@example.com").display_name == "Ana"
    assert UserSummary(id="1", email="ana@example.com").display_name == "ana@example.com"
    assert UserSummary(id="1").display_name == "Unknown user"
