"""ORM models used by the application infrastructure."""

from .message import MessageModel
from .notification import NotificationModel
from .profile import CredentialModel, ProfileModel, UserRoleModel
from .property import PropertyModel
from .reservation import PaymentModel, ReservationModel
from .review import ReviewModel

TABLES = {
    "profiles": ProfileModel,
    "user_roles": UserRoleModel,
    "credentials": CredentialModel,
    "properties": PropertyModel,
    "reservations": ReservationModel,
    "payments": PaymentModel,
    "reviews": ReviewModel,
    "messages": MessageModel,
    "notifications": NotificationModel,
}

__all__ = [
    "CredentialModel",
    "MessageModel",
    "NotificationModel",
    "PaymentModel",
    "ProfileModel",
    "PropertyModel",
    "ReservationModel",
    "ReviewModel",
    "TABLES",
    "UserRoleModel",
]
