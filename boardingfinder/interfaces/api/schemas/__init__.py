from .admin import AdminUserRead, PlatformStatsRead
from .auth import IdentityRead, SignUpRequest, Token
from .message import ConversationRead, MessageCreate, MessageRead
from .notification import NotificationRead
from .profile import ProfileRead, ProfileUpdate, UserSummaryRead
from .property import PropertyCreate, PropertyDetailRead, PropertyRead, PropertyStatusUpdate
from .reservation import (
    PaymentCreate,
    PaymentRead,
    PaymentVerification,
    ReservationCreate,
    ReservationRead,
    ReservationStatusUpdate,
)
from .review import ReviewCreate, ReviewModeration, ReviewRead

__all__ = [
    "AdminUserRead",
    "ConversationRead",
    "IdentityRead",
    "MessageCreate",
    "MessageRead",
    "NotificationRead",
    "PaymentCreate",
    "PaymentRead",
    "PaymentVerification",
    "PlatformStatsRead",
    "ProfileRead",
    "ProfileUpdate",
    "PropertyCreate",
    "PropertyDetailRead",
    "PropertyRead",
    "PropertyStatusUpdate",
    "ReservationCreate",
    "ReservationRead",
    "ReservationStatusUpdate",
    "ReviewCreate",
    "ReviewModeration",
    "ReviewRead",
    "SignUpRequest",
    "Token",
    "UserSummaryRead",
]
