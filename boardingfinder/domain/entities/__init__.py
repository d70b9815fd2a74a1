"""Domain entities exposed by the application."""

from .conversation import Conversation
from .message import Message
from .notification import Notification, NotificationType
from .payment import Payment, PaymentMethod, PaymentStatus
from .profile import Profile, UserSummary
from .property import Property, PropertyStatus
from .reservation import Reservation, ReservationStatus
from .review import MAX_RATING, MIN_RATING, Review
from .role import DEFAULT_ROLE, UserRole
from .session import Identity, SessionContext

__all__ = [
    "Conversation",
    "DEFAULT_ROLE",
    "Identity",
    "MAX_RATING",
    "MIN_RATING",
    "Message",
    "Notification",
    "NotificationType",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "Profile",
    "Property",
    "PropertyStatus",
    "Reservation",
    "ReservationStatus",
    "Review",
    "SessionContext",
    "UserRole",
    "UserSummary",
]
