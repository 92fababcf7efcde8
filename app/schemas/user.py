# File: app/schemas/user.py

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.security import MAX_PASSWORD_BYTES, password_too_long


def normalize_email(email: str) -> str:
    """Emails are stored and compared trimmed and lowercased."""
    return email.strip().lower()


class LoginUser(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize(cls, v: str) -> str:
        return normalize_email(v)


class CreateUser(BaseModel):
    """Registration payload as received. Field rules live on ``NewUser``."""
    name: str
    email: str
    password: str


class NewUser(BaseModel):
    """Field-level rules a user must satisfy before it is persisted."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("name", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("password")
    @classmethod
    def fits_hash_input(cls, v: str) -> str:
        if password_too_long(v):
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @field_validator("email", mode="after")
    @classmethod
    def normalize(cls, v: str) -> str:
        return normalize_email(str(v))


class UpdateUser(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    password: Optional[str] = None


class UserView(BaseModel):
    name: str
    email: str
    bio: Optional[str] = None
    token: str
    avatar: Optional[str] = None


class UserEnvelope(BaseModel):
    user: UserView


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    bio: Optional[str] = None
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class DeleteResult(BaseModel):
    affected: int
