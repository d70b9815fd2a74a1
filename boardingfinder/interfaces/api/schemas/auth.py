"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field

from boardingfinder.domain.entities import UserRole


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str | None = Field(default=None, max_length=120)
    role: UserRole = UserRole.TENANT


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class IdentityRead(BaseModel):
    id: str
    email: str
    role: UserRole
