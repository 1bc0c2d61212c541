"""
User Schemas

Request/response models for authentication and profile endpoints.
"""

import re
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from puppymatch.shared.schemas.common import BaseSchema
from puppymatch.shared.utils.text import has_control_characters


USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,32}$")
TELEGRAM_PATTERN = re.compile(r"^@[A-Za-z0-9_]{5,32}$")


class RegisterRequest(BaseModel):
    """Schema for user registration. `username` is accepted as an alias of `email`."""

    email: EmailStr = Field(validation_alias=AliasChoices("email", "username"))
    password: str = Field(description="Password (length policy enforced by the service)")

    @field_validator("email", mode="before")
    @classmethod
    def screen_email(cls, value):
        if isinstance(value, str) and has_control_characters(value):
            raise ValueError("Email contains invalid characters")
        return value


class LoginRequest(BaseModel):
    """Schema for user login."""

    email: str = Field(min_length=1, validation_alias=AliasChoices("email", "username"))
    password: str = Field(min_length=1)


class UserResponse(BaseSchema):
    """Schema for the caller's own profile."""

    id: UUID
    email: str
    username: Optional[str] = None
    telegram_handle: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None


class AuthResponse(BaseSchema):
    """Schema for register/login responses."""

    token: str
    user_id: UUID
    token_type: str = "bearer"
    expires_in: int  # seconds
    user: UserResponse


class ProfileUpdate(BaseSchema):
    """
    Partial profile update.

    Omitted fields are left alone; an empty string clears the field.
    """

    username: Optional[str] = None
    telegram_handle: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("username")
    @classmethod
    def check_username(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if value and not USERNAME_PATTERN.match(value):
            raise ValueError("Username must be 3-32 letters, digits, '_', '.' or '-'")
        return value

    @field_validator("telegram_handle")
    @classmethod
    def check_telegram_handle(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return value
        if not value.startswith("@"):
            value = f"@{value}"
        if not TELEGRAM_PATTERN.match(value):
            raise ValueError("Telegram handle must be 5-32 letters, digits or '_'")
        return value

    @field_validator("avatar_url")
    @classmethod
    def check_avatar_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if has_control_characters(value):
            raise ValueError("Avatar URL contains invalid characters")
        if value and not value.lower().startswith(("http://", "https://")):
            raise ValueError("Avatar URL must start with http:// or https://")
        if len(value) > 2048:
            raise ValueError("Avatar URL is too long")
        return value
