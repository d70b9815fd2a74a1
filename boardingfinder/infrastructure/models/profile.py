"""SQLAlchemy models for profiles, roles and stored credentials."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from boardingfinder.infrastructure.database import Base

from ._columns import new_id, utc_now


class ProfileModel(Base):
    """Public profile row, keyed by the user id."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    full_name = Column(String(120), nullable=True)
    phone = Column(String(40), nullable=True)
    bio = Column(Text, nullable=True)
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=utc_now)


class UserRoleModel(Base):
    __tablename__ = "user_roles"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(
        String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    role = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


class CredentialModel(Base):
    """Password hash store standing in for the hosted auth provider."""

    __tablename__ = "credentials"

    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


__all__ = ["CredentialModel", "ProfileModel", "UserRoleModel"]
