"""User-related use cases."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .register_user import SELF_ASSIGNABLE_ROLES, create_admin_user, register_user
from .session_context import issue_access_token, resolve_session_context

__all__ = [
    "AuthenticationStatus",
    "SELF_ASSIGNABLE_ROLES",
    "authenticate_user",
    "create_admin_user",
    "issue_access_token",
    "register_user",
    "resolve_session_context",
]
