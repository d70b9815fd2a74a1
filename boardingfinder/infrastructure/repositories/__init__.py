"""Repository implementations for infrastructure layer."""

from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .profile_repository import CredentialRepository, ProfileRepository, UserRoleRepository
from .property_repository import PropertyRepository
from .reservation_repository import PaymentRepository, ReservationRepository
from .review_repository import ReviewRepository

__all__ = [
    "CredentialRepository",
    "MessageRepository",
    "NotificationRepository",
    "PaymentRepository",
    "ProfileRepository",
    "PropertyRepository",
    "ReservationRepository",
    "ReviewRepository",
    "UserRoleRepository",
]
